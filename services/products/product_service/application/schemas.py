from decimal import Decimal
from pydantic import BaseModel, Field, field_validator
from pydantic.alias_generators import to_camel
from typing import Annotated, Optional
from product_service.domain.models import (
    MAX_CATEGORY_LENGTH,
    MAX_NAME_LENGTH,
    MAX_STOCK_QUANTITY,
    PRICE_DIGITS,
    PRICE_SCALE,
)

# Exclusive upper bound of Numeric(PRICE_DIGITS, PRICE_SCALE)
MAX_PRICE = Decimal(10) ** (PRICE_DIGITS - PRICE_SCALE)

class ProductCreate(BaseModel):
    name: str = Field(max_length=MAX_NAME_LENGTH)
    description: Optional[str] = None
    price: float = Field(allow_inf_nan=False)
    category: Optional[str] = Field(default=None, max_length=MAX_CATEGORY_LENGTH)
    # Informational; not reconciled with inventory counts
    stock_quantity: Optional[Annotated[int, Field(ge=-MAX_STOCK_QUANTITY, le=MAX_STOCK_QUANTITY)]] = None

    class Config:
        alias_generator = to_camel
        populate_by_name = True

    @field_validator("name")
    @classmethod
    def name_not_blank(cls, value: str) -> str:
        if not value or not value.strip():
            raise ValueError("Product name is required")
        return value

    @field_validator("price")
    @classmethod
    def price_fits_column(cls, value: float) -> float:
        if value <= 0:
            raise ValueError("Price must be positive")
        exact = Decimal(str(value))
        if exact >= MAX_PRICE:
            raise ValueError(f"Price must be less than {MAX_PRICE}")
        if exact.as_tuple().exponent < -PRICE_SCALE:
            raise ValueError(f"Price must have at most {PRICE_SCALE} decimal places")
        return value

class ProductRead(BaseModel):
    id: int
    name: str
    description: Optional[str] = None
    price: float
    category: Optional[str] = None
    stock_quantity: Optional[int] = None

    class Config:
        from_attributes = True
        alias_generator = to_camel
        populate_by_name = True

class ProductAvailability(BaseModel):
    product_code: str
    in_stock: bool

    class Config:
        alias_generator = to_camel
        populate_by_name = True
