# cli.py
import sys
from datetime import datetime
from pathlib import Path
from typing import List, Optional

from rich.console import Console
from rich.table import Table
from rich.panel import Panel
from rich.prompt import IntPrompt, Confirm, Prompt
from rich.progress import Progress, SpinnerColumn, TextColumn
from rich import box

from prompt_toolkit import prompt
from prompt_toolkit.completion import WordCompleter
from prompt_toolkit.styles import Style as PromptStyle

from inventory.config import get_settings
from inventory.core import SearchResult, make_product
from inventory.database import InventoryStore
from inventory.errors import InventoryError
from inventory.log import setup_logging
from inventory.models import Product

console = Console()
store = InventoryStore()

status_message = "Ready"

# Custom prompt style for prompt_toolkit
custom_style = PromptStyle.from_dict({
    'completion-menu.completion': 'bg:#008888 #ffffff',
    'completion-menu.completion.current': 'bg:#00aaaa #000000',
    'scrollbar.background': 'bg:#88aaaa',
    'scrollbar.button': 'bg:#222222',
})


# ---------------------------
# Display helpers
# ---------------------------
def show_products(products: List[Product], out: Optional[Console] = None):
    out = out or console
    if not products:
        out.print("[italic yellow]Inventory is empty[/italic yellow]")
        return

    table = Table(
        title="📦 Inventory",
        box=box.ROUNDED,
        header_style="bold cyan",
        title_style="bold magenta",
        show_lines=True
    )
    table.add_column("ID", style="dim", justify="right", width=6)
    table.add_column("Name", style="bold", width=20)
    table.add_column("Category", width=20)
    table.add_column("Qty", justify="right", width=8)
    table.add_column("Price", justify="right", width=12)
    table.add_column("Kind", width=12)

    for p in products:
        table.add_row(
            str(p.id),
            p.name,
            p.category,
            str(p.quantity),
            f"{p.price:.2f}",
            p.kind.value
        )
    out.print(table)


def format_search_result(result: SearchResult) -> str:
    if not result.found:
        return "Product not found."
    blocks = []
    for p in result.matches:
        blocks.append(
            f"ID: {p.id}\n"
            f"Name: {p.name}\n"
            f"Category: {p.category}\n"
            f"Quantity: {p.quantity}\n"
            f"Price: {p.price}"
        )
    return "\n\n".join(blocks)


def show_search_result(result: SearchResult, out: Optional[Console] = None):
    out = out or console
    style = "green" if result.found else "yellow"
    out.print(Panel(
        format_search_result(result),
        title=f"🔍 Search: {result.query}",
        border_style=style
    ))


def show_status(message: str, is_success: bool = True):
    style = "green" if is_success else "red"
    return Panel.fit(f"[{style}]{message}[/{style}]", title="Status")


# ---------------------------
# Store wrapper with error reporting
# ---------------------------
def try_action(fn, *args, success_msg: Optional[str] = None, **kwargs):
    """
    Calls fn(*args, **kwargs) behind a spinner.
    Inventory errors are shown as a status panel and yield None.
    """
    global status_message
    try:
        with Progress(
            SpinnerColumn(),
            TextColumn("[progress.description]{task.description}"),
            transient=True,
            console=console,
        ) as progress:
            progress.add_task(description="Processing...", total=None)
            result = fn(*args, **kwargs)

        if success_msg:
            status_message = success_msg
            console.print(show_status(success_msg, True))
        return result
    except InventoryError as e:
        status_message = f"Error: {e}"
        console.print(show_status(f"Error: {e}", False))
        return None


def run_search(term: str) -> SearchResult:
    return store.search_async(term).result()


# ---------------------------
# Autocompletion helpers
# ---------------------------
def get_name_completer():
    names = sorted({p.name for p in store.list()})
    return WordCompleter(names, ignore_case=True)


def get_id_completer():
    ids = sorted({str(p.id) for p in store.list()})
    return WordCompleter(ids)


# ---------------------------
# Layout and Header
# ---------------------------
def create_header():
    header = Table(show_header=False, box=box.ROUNDED)
    header.add_column("left", width=30)
    header.add_column("center", width=40)
    header.add_column("right", width=30)

    now = datetime.now().strftime("%Y-%m-%d %H:%M:%S")
    header.add_row(
        "📦 Inventory",
        "[bold blue]Inventory Management[/bold blue]",
        f"[dim]{now}[/dim]"
    )
    return Panel(header, style="bold blue")


# ---------------------------
# Input helpers
# ---------------------------
def prompt_with_autocomplete(message: str, completer=None, default: str = ""):
    return prompt(f"{message} ", completer=completer, style=custom_style, default=default)


def ask_float(message: str, default: float = 0.0) -> float:
    while True:
        raw = Prompt.ask(message, default=str(default))
        try:
            return float(raw)
        except ValueError:
            console.print("[red]Please enter a valid number.[/red]")


def ask_path(message: str, default: Path) -> Path:
    return Path(prompt_with_autocomplete(message, default=str(default)).strip() or default)


def add_product_interactive():
    pid = IntPrompt.ask("🔢 ID")
    name = prompt_with_autocomplete("Enter product name").strip()
    category = prompt_with_autocomplete("🏷️ Category").strip()
    qty = IntPrompt.ask("📦 Quantity", default=1)
    price = ask_float("💰 Price", default=0.0)
    product = make_product(id=pid, name=name, category=category, quantity=qty, price=price)
    store.add(product)
    return product


# ---------------------------
# Main menu
# ---------------------------
def menu():
    global status_message

    settings = get_settings()
    data_file = settings.data_file

    console.clear()
    console.print(create_header())

    while True:
        if status_message:
            console.print(show_status(status_message, "Error" not in status_message))

        menu_table = Table.grid(padding=(0, 2))
        menu_table.add_column("Key", style="bold cyan", width=4)
        menu_table.add_column("Option", width=30)
        menu_table.add_column("Key", style="bold cyan", width=4)
        menu_table.add_column("Option", width=30)

        options = [
            ("1", "📦 List products", "5", "📊 Average price"),
            ("2", "🔍 Search products", "6", "💾 Save inventory"),
            ("3", "➕ Add product", "7", "📂 Load inventory"),
            ("4", "➖ Remove product", "q", "👋 Quit"),
        ]

        for row in options:
            menu_table.add_row(*row)

        console.print(Panel(menu_table, title="📋 Menu", border_style="yellow"))

        choice = prompt_with_autocomplete(
            "\nChoose an option",
            completer=WordCompleter([str(i) for i in range(1, 8)] + ["q", "quit", "exit"])
        ).strip()

        if choice == "1":
            show_products(store.list())

        elif choice == "2":
            term = prompt_with_autocomplete("Enter product name", completer=get_name_completer()).strip()
            res = try_action(run_search, term, success_msg=f"Search for '{term}' completed")
            if res is not None:
                show_search_result(res)

        elif choice == "3":
            product = try_action(add_product_interactive)
            if product is not None:
                status_message = f"Product '{product.name}' added"
                show_products(store.list())

        elif choice == "4":
            pid = IntPrompt.ask("Enter product ID to remove")
            result = store.remove(pid)
            if result.removed:
                status_message = f"Removed {result.removed_count} product(s) with ID {pid}"
            else:
                status_message = f"Error: Product not found with ID: {pid}"
            show_products(store.list())

        elif choice == "5":
            console.print(Panel.fit(
                f"[bold]Average price:[/bold] [green]{store.average_price():.2f}[/green] "
                f"over {len(store)} product(s)",
                title="📊 Stats"
            ))

        elif choice == "6":
            path = ask_path("Save to", data_file)
            try_action(store.save, path, success_msg=f"Saved {len(store)} product(s) to {path}")

        elif choice == "7":
            path = ask_path("Load from", data_file)
            if Confirm.ask("[red]This replaces the current inventory. Continue?[/red]"):
                try_action(store.load, path, success_msg=f"Loaded inventory from {path}")
                show_products(store.list())

        elif choice.lower() in ("q", "quit", "exit"):
            if Confirm.ask("Are you sure you want to quit?"):
                console.print(Panel.fit("[bold green]Goodbye! 👋[/bold green]", title="Goodbye"))
                store.close()
                sys.exit(0)

        console.print()
        console.rule(style="dim")


def main():
    settings = get_settings()
    setup_logging(settings.log_level, settings.log_file)
    try:
        menu()
    except KeyboardInterrupt:
        console.print("\n\n[bold red]Interrupted by user[/bold red]")
        store.close()
        sys.exit(1)


if __name__ == "__main__":
    main()
