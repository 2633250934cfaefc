# inventory/models.py
from enum import Enum

from pydantic import BaseModel, ConfigDict, Field, StrictFloat, StrictInt, StrictStr


class ProductKind(str, Enum):
    ELECTRONIC = "Electronic"


class Product(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: StrictInt
    name: StrictStr
    category: StrictStr
    quantity: StrictInt
    # inf/nan would be written as JSON null and never load back
    price: StrictFloat = Field(allow_inf_nan=False)
    kind: ProductKind = ProductKind.ELECTRONIC
