from pydantic import BaseModel, Field, StrictInt, field_validator
from pydantic.alias_generators import to_camel
from typing import Annotated, Optional
from inventory_service.domain.models import (
    MAX_LOCATION_LENGTH,
    MAX_PRODUCT_CODE_LENGTH,
    MAX_PRODUCT_ID,
    MAX_QUANTITY,
)

class InventoryItemCreate(BaseModel):
    product_code: str = Field(max_length=MAX_PRODUCT_CODE_LENGTH)
    quantity: int = Field(le=MAX_QUANTITY)
    warehouse_location: Optional[str] = Field(default=None, max_length=MAX_LOCATION_LENGTH)
    product_id: int = Field(ge=-MAX_PRODUCT_ID - 1, le=MAX_PRODUCT_ID)

    class Config:
        alias_generator = to_camel
        populate_by_name = True

    @field_validator("product_code")
    @classmethod
    def product_code_not_blank(cls, value: str) -> str:
        if not value or not value.strip():
            raise ValueError("Product code is required")
        return value

    @field_validator("quantity", mode="after")
    @classmethod
    def quantity_not_negative(cls, value: int) -> int:
        if value < 0:
            raise ValueError("Quantity cannot be negative")
        return value

class InventoryItemRead(BaseModel):
    id: int
    product_code: str
    quantity: int
    warehouse_location: Optional[str] = None
    product_id: int

    class Config:
        from_attributes = True
        alias_generator = to_camel
        populate_by_name = True

class QuantityAdjustment(BaseModel):
    # Optional so a missing field reaches the route and is reported as an invalid argument
    # Strict so a boolean is not taken as 0 or 1
    quantity_change: Optional[Annotated[StrictInt, Field(ge=-MAX_QUANTITY, le=MAX_QUANTITY)]] = None

    class Config:
        alias_generator = to_camel
        populate_by_name = True

class StockCheckResponse(BaseModel):
    in_stock: bool

    class Config:
        alias_generator = to_camel
        populate_by_name = True
