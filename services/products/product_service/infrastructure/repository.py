from typing import List, Optional

from sqlalchemy import select
from sqlalchemy.orm import Session

from product_service.domain.models import Product


class ProductRepository:
    def __init__(self, db: Session):
        self.db = db

    def find_all(self) -> List[Product]:
        return list(self.db.scalars(select(Product)))

    def find_by_id(self, product_id: int) -> Optional[Product]:
        return self.db.get(Product, product_id)

    def find_by_category(self, category: str) -> List[Product]:
        return list(self.db.scalars(select(Product).where(Product.category == category)))

    def find_by_price_less_than(self, price: float) -> List[Product]:
        return list(self.db.scalars(select(Product).where(Product.price < price)))

    def find_by_stock_quantity_greater_than(self, quantity: int) -> List[Product]:
        return list(self.db.scalars(select(Product).where(Product.stock_quantity > quantity)))

    def search_by_name_containing_ignore_case(self, name: str) -> List[Product]:
        # autoescape so "%" and "_" in the search text match literally
        stmt = select(Product).where(Product.name.icontains(name, autoescape=True))
        return list(self.db.scalars(stmt))

    def save(self, product: Product) -> Product:
        self.db.add(product)
        self.db.commit()
        self.db.refresh(product)
        return product

    def delete(self, product: Product) -> None:
        self.db.delete(product)
        self.db.commit()
