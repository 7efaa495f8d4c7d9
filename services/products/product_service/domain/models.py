from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column
from sqlalchemy import String, Numeric, Integer, Text
from typing import Optional

# Limits of the columns below; schemas validate against them
MAX_NAME_LENGTH = 200
MAX_CATEGORY_LENGTH = 100
PRICE_DIGITS = 10
PRICE_SCALE = 2
MAX_STOCK_QUANTITY = 2**31 - 1

class Base(DeclarativeBase):
    pass

class Product(Base):
    __tablename__ = "products"
    id: Mapped[int] = mapped_column(primary_key=True)
    name: Mapped[str] = mapped_column(String(MAX_NAME_LENGTH))
    description: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    price: Mapped[float] = mapped_column(Numeric(PRICE_DIGITS, PRICE_SCALE))
    category: Mapped[Optional[str]] = mapped_column(String(MAX_CATEGORY_LENGTH), nullable=True, index=True)
    # Informational only; the inventory service owns the real stock count
    stock_quantity: Mapped[Optional[int]] = mapped_column(Integer, nullable=True)

    def __repr__(self) -> str:
        return f"Product(id={self.id!r}, name={self.name!r})"
