from typing import List

from shared.core import InvalidArgumentError, ResourceNotFoundError, get_logger
from inventory_service.domain.models import MAX_QUANTITY, InventoryItem
from inventory_service.infrastructure.repository import InventoryRepository
from .schemas import InventoryItemCreate

logger = get_logger(__name__)

DEFAULT_REQUIRED_QUANTITY = 1
DEFAULT_LOW_STOCK_THRESHOLD = 5


class InventoryService:
    def __init__(self, repository: InventoryRepository):
        self.repository = repository

    def get_all_inventory_items(self) -> List[InventoryItem]:
        return self.repository.find_all()

    def get_inventory_item_by_id(self, item_id: int) -> InventoryItem:
        item = self.repository.find_by_id(item_id)
        if item is None:
            raise ResourceNotFoundError(f"Inventory item not found with id: {item_id}")
        return item

    def get_inventory_item_by_product_code(self, product_code: str) -> InventoryItem:
        item = self.repository.find_by_product_code(product_code)
        if item is None:
            raise ResourceNotFoundError(f"Inventory item not found with product code: {product_code}")
        return item

    def get_inventory_items_by_product_id(self, product_id: int) -> List[InventoryItem]:
        return self.repository.find_by_product_id(product_id)

    def get_inventory_items_by_warehouse_location(self, warehouse_location: str) -> List[InventoryItem]:
        return self.repository.find_by_warehouse_location(warehouse_location)

    def create_inventory_item(self, data: InventoryItemCreate) -> InventoryItem:
        item = self.repository.save(InventoryItem(**data.model_dump()))
        logger.info(f"Created inventory item {item.id} for product code {item.product_code}")
        return item

    def update_inventory_item(self, item_id: int, data: InventoryItemCreate) -> InventoryItem:
        item = self.get_inventory_item_by_id(item_id)
        item.product_code = data.product_code
        item.quantity = data.quantity
        item.warehouse_location = data.warehouse_location
        item.product_id = data.product_id
        item = self.repository.save(item)
        logger.info(f"Updated inventory item {item.id}")
        return item

    def delete_inventory_item(self, item_id: int) -> None:
        item = self.get_inventory_item_by_id(item_id)
        self.repository.delete(item)
        logger.info(f"Deleted inventory item {item_id}")

    def update_inventory_quantity(self, product_code: str, quantity_change: int) -> InventoryItem:
        """
        Apply a signed delta to the stock count of ``product_code``.

        The row is read with a lock and written in the same transaction. A
        change that would leave the count below zero raises
        InvalidArgumentError and writes nothing.
        """
        item = self.repository.find_by_product_code(product_code, for_update=True)
        if item is None:
            self.repository.rollback()
            raise ResourceNotFoundError(f"Inventory item not found with product code: {product_code}")

        new_quantity = item.quantity + quantity_change
        if new_quantity < 0:
            self.repository.rollback()
            logger.warning(
                f"Rejected quantity change {quantity_change} for {product_code}: "
                f"only {item.quantity} on hand"
            )
            raise InvalidArgumentError("Cannot reduce quantity below zero")
        if new_quantity > MAX_QUANTITY:
            self.repository.rollback()
            logger.warning(
                f"Rejected quantity change {quantity_change} for {product_code}: "
                f"{item.quantity} on hand would overflow"
            )
            raise InvalidArgumentError(f"Quantity cannot exceed {MAX_QUANTITY}")

        item.quantity = new_quantity
        item = self.repository.save(item)
        logger.info(f"Adjusted quantity of {product_code} by {quantity_change} to {new_quantity}")
        return item

    def is_in_stock(self, product_code: str, required_quantity: int = DEFAULT_REQUIRED_QUANTITY) -> bool:
        # An unknown code is simply "not in stock", unlike the by-code lookup.
        item = self.repository.find_by_product_code(product_code)
        if item is None:
            return False
        return item.quantity >= required_quantity

    def get_low_stock_items(self, threshold: int = DEFAULT_LOW_STOCK_THRESHOLD) -> List[InventoryItem]:
        return self.repository.find_by_quantity_less_than(threshold)
