from typing import List

from shared.core import ResourceNotFoundError, get_logger
from product_service.domain.models import Product
from product_service.infrastructure.inventory_client import StockChecker
from product_service.infrastructure.repository import ProductRepository
from .schemas import ProductCreate

logger = get_logger(__name__)


class ProductService:
    def __init__(self, repository: ProductRepository, stock_checker: StockChecker):
        self.repository = repository
        self.stock_checker = stock_checker

    def get_all_products(self) -> List[Product]:
        return self.repository.find_all()

    def get_product_by_id(self, product_id: int) -> Product:
        product = self.repository.find_by_id(product_id)
        if product is None:
            raise ResourceNotFoundError(f"Product not found with id: {product_id}")
        return product

    def create_product(self, data: ProductCreate) -> Product:
        product = self.repository.save(Product(**data.model_dump()))
        logger.info(f"Created product {product.id}: {product.name}")
        return product

    def update_product(self, product_id: int, data: ProductCreate) -> Product:
        product = self.get_product_by_id(product_id)
        product.name = data.name
        product.description = data.description
        product.price = data.price
        product.category = data.category
        product.stock_quantity = data.stock_quantity
        product = self.repository.save(product)
        logger.info(f"Updated product {product.id}")
        return product

    def delete_product(self, product_id: int) -> None:
        product = self.get_product_by_id(product_id)
        self.repository.delete(product)
        logger.info(f"Deleted product {product_id}")

    def get_products_by_category(self, category: str) -> List[Product]:
        return self.repository.find_by_category(category)

    def get_products_with_price_less_than(self, price: float) -> List[Product]:
        return self.repository.find_by_price_less_than(price)

    def search_products_by_name(self, name: str) -> List[Product]:
        return self.repository.search_by_name_containing_ignore_case(name)

    def get_products_in_stock(self, min_quantity: int = 0) -> List[Product]:
        """Products whose informational stock_quantity exceeds ``min_quantity``"""
        return self.repository.find_by_stock_quantity_greater_than(min_quantity)

    def is_product_in_stock(self, product_code: str, quantity: int = 1) -> bool:
        """Ask the inventory service; a failed call counts as not in stock"""
        return self.stock_checker.check_stock(product_code, quantity)
