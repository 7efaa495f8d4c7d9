"""Data access for inventory items.

One repository per request, wrapping that request's Session. Query methods
mirror the lookups the service needs; none of them commit except ``save``
and ``delete``.
"""

from typing import List, Optional

from sqlalchemy import select
from sqlalchemy.orm import Session

from inventory_service.domain.models import InventoryItem


class InventoryRepository:
    def __init__(self, db: Session):
        self.db = db

    def find_all(self) -> List[InventoryItem]:
        return list(self.db.scalars(select(InventoryItem)))

    def find_by_id(self, item_id: int) -> Optional[InventoryItem]:
        return self.db.get(InventoryItem, item_id)

    def find_by_product_code(self, product_code: str, for_update: bool = False) -> Optional[InventoryItem]:
        # Codes are not unique in the schema; with duplicates this returns
        # whichever row the database yields first.
        stmt = select(InventoryItem).where(InventoryItem.product_code == product_code)
        if for_update:
            stmt = stmt.with_for_update()
        return self.db.scalars(stmt).first()

    def find_by_product_id(self, product_id: int) -> List[InventoryItem]:
        return list(self.db.scalars(select(InventoryItem).where(InventoryItem.product_id == product_id)))

    def find_by_warehouse_location(self, warehouse_location: str) -> List[InventoryItem]:
        stmt = select(InventoryItem).where(InventoryItem.warehouse_location == warehouse_location)
        return list(self.db.scalars(stmt))

    def find_by_quantity_less_than(self, quantity: int) -> List[InventoryItem]:
        return list(self.db.scalars(select(InventoryItem).where(InventoryItem.quantity < quantity)))

    def save(self, item: InventoryItem) -> InventoryItem:
        self.db.add(item)
        self.db.commit()
        self.db.refresh(item)
        return item

    def delete(self, item: InventoryItem) -> None:
        self.db.delete(item)
        self.db.commit()

    def rollback(self) -> None:
        self.db.rollback()
