from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column
from sqlalchemy import String, Integer, BigInteger, CheckConstraint
from typing import Optional

# Limits of the columns below; schemas validate against them
MAX_PRODUCT_CODE_LENGTH = 100
MAX_LOCATION_LENGTH = 200
MAX_QUANTITY = 2**31 - 1
MAX_PRODUCT_ID = 2**63 - 1

class Base(DeclarativeBase):
    pass

class InventoryItem(Base):
    __tablename__ = "inventory_items"
    __table_args__ = (
        CheckConstraint("quantity >= 0", name="ck_inventory_items_quantity_non_negative"),
    )
    id: Mapped[int] = mapped_column(primary_key=True)
    # Lookup key for stock checks; indexed but not unique
    product_code: Mapped[str] = mapped_column(String(MAX_PRODUCT_CODE_LENGTH), index=True)
    quantity: Mapped[int] = mapped_column(Integer)
    warehouse_location: Mapped[Optional[str]] = mapped_column(String(MAX_LOCATION_LENGTH), nullable=True)
    # Product ID lives in the product service - no foreign key
    product_id: Mapped[int] = mapped_column(BigInteger, index=True)

    def __repr__(self) -> str:
        return f"InventoryItem(id={self.id!r}, product_code={self.product_code!r}, quantity={self.quantity!r})"
