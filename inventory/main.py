# inventory/main.py
import asyncio
import logging
from contextlib import asynccontextmanager
from typing import List, Optional

from fastapi import APIRouter, FastAPI, HTTPException, Query, Request

from .config import InventorySettings, get_settings
from .core import AveragePrice, ProductIn, RemoveResult, SearchResult, _product_from_payload
from .database import InventoryStore
from .errors import StorageFormatError, StorageIOError
from .log import setup_logging
from .models import Product

logger = logging.getLogger(__name__)

router = APIRouter()


def _store(request: Request) -> InventoryStore:
    return request.app.state.store


def _settings(request: Request) -> InventorySettings:
    return request.app.state.settings


# ---------------------------
# Product endpoints
# ---------------------------
@router.post("/products", status_code=201, response_model=Product)
async def add_product(payload: ProductIn, request: Request):
    product = _product_from_payload(payload)
    _store(request).add(product)
    return product


@router.get("/products", response_model=List[Product])
async def list_products(request: Request):
    return _store(request).list()


@router.get("/products/search", response_model=SearchResult)
async def search_products(request: Request, name: str = Query(..., min_length=1)):
    # runs on the store's search worker, not the event loop
    return await asyncio.wrap_future(_store(request).search_async(name))


@router.delete("/products/{product_id}", response_model=RemoveResult)
async def remove_product(product_id: int, request: Request):
    result = _store(request).remove(product_id)
    if not result.removed:
        raise HTTPException(status_code=404, detail="product not found")
    return result


# ---------------------------
# Stats
# ---------------------------
@router.get("/stats/average-price", response_model=AveragePrice)
async def average_price(request: Request):
    store = _store(request)
    return AveragePrice(average_price=store.average_price(), count=len(store))


# ---------------------------
# Persistence
# ---------------------------
@router.post("/inventory/save")
def save_inventory(request: Request):
    path = _settings(request).data_file
    try:
        _store(request).save(path)
    except StorageIOError as e:
        raise HTTPException(status_code=500, detail=str(e))
    return {"status": "saved", "path": str(path), "count": len(_store(request))}


@router.post("/inventory/load")
def load_inventory(request: Request):
    path = _settings(request).data_file
    try:
        _store(request).load(path)
    except StorageIOError as e:
        raise HTTPException(status_code=404, detail=str(e))
    except StorageFormatError as e:
        raise HTTPException(status_code=422, detail=str(e))
    return {"status": "loaded", "path": str(path), "count": len(_store(request))}


@asynccontextmanager
async def lifespan(app: FastAPI):
    yield
    # stop the search worker owned by this app's store
    app.state.store.close()


def create_app(store: Optional[InventoryStore] = None, settings: Optional[InventorySettings] = None) -> FastAPI:
    app = FastAPI(title="inventory-store (local API)", lifespan=lifespan)
    app.state.store = store if store is not None else InventoryStore()
    app.state.settings = settings if settings is not None else get_settings()
    app.include_router(router)
    return app


app = create_app()


def run():
    import uvicorn

    settings = get_settings()
    setup_logging(settings.log_level, settings.log_file)
    logger.info("serving inventory API on %s:%s", settings.api_host, settings.api_port)
    uvicorn.run(app, host=settings.api_host, port=settings.api_port, log_level="warning")


if __name__ == "__main__":
    run()
