from fastapi import APIRouter, Depends, Query, Response
from sqlalchemy.orm import Session
from product_service.core_settings import get_settings
from product_service.infrastructure.db import get_db
from product_service.infrastructure.inventory_client import HttpInventoryClient, StockChecker
from product_service.infrastructure.repository import ProductRepository
from product_service.application.service import ProductService
from product_service.application.schemas import ProductCreate, ProductRead, ProductAvailability

router = APIRouter(prefix="/api/products", tags=["products"])

def get_stock_checker() -> StockChecker:
    settings = get_settings()
    return HttpInventoryClient(settings.INVENTORY_SERVICE_URL, timeout=settings.INVENTORY_SERVICE_TIMEOUT)

def get_product_service(
    db: Session = Depends(get_db),
    stock_checker: StockChecker = Depends(get_stock_checker),
) -> ProductService:
    return ProductService(ProductRepository(db), stock_checker)

@router.get("", response_model=list[ProductRead])
def list_products(service: ProductService = Depends(get_product_service)):
    return service.get_all_products()

# Fixed paths are declared before /{product_id} so they are not parsed as ids
@router.get("/category/{category}", response_model=list[ProductRead])
def get_products_by_category(category: str, service: ProductService = Depends(get_product_service)):
    return service.get_products_by_category(category)

@router.get("/price", response_model=list[ProductRead])
def get_products_by_price(
    max_price: float = Query(..., alias="max", description="Exclusive upper bound"),
    service: ProductService = Depends(get_product_service),
):
    return service.get_products_with_price_less_than(max_price)

@router.get("/search", response_model=list[ProductRead])
def search_products(
    name: str = Query(..., description="Case-insensitive substring of the product name"),
    service: ProductService = Depends(get_product_service),
):
    return service.search_products_by_name(name)

@router.get("/in-stock", response_model=list[ProductRead])
def get_products_in_stock(
    min_quantity: int = Query(0, alias="min", description="Products with more units than this"),
    service: ProductService = Depends(get_product_service),
):
    return service.get_products_in_stock(min_quantity)

@router.get("/availability/{product_code}", response_model=ProductAvailability)
def get_product_availability(
    product_code: str,
    quantity: int = Query(1, description="Units required"),
    service: ProductService = Depends(get_product_service),
):
    return ProductAvailability(
        product_code=product_code,
        in_stock=service.is_product_in_stock(product_code, quantity),
    )

@router.get("/{product_id}", response_model=ProductRead)
def get_product(product_id: int, service: ProductService = Depends(get_product_service)):
    return service.get_product_by_id(product_id)

@router.post("", response_model=ProductRead, status_code=201)
def create_product(payload: ProductCreate, service: ProductService = Depends(get_product_service)):
    return service.create_product(payload)

@router.put("/{product_id}", response_model=ProductRead)
def update_product(product_id: int, payload: ProductCreate, service: ProductService = Depends(get_product_service)):
    return service.update_product(product_id, payload)

@router.delete("/{product_id}", status_code=204)
def delete_product(product_id: int, service: ProductService = Depends(get_product_service)):
    service.delete_product(product_id)
    return Response(status_code=204)
