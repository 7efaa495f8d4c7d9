from fastapi import APIRouter, Depends, Query, Response
from sqlalchemy.orm import Session
from shared.core import InvalidArgumentError
from inventory_service.infrastructure.db import get_db
from inventory_service.infrastructure.repository import InventoryRepository
from inventory_service.application.service import (
    InventoryService,
    DEFAULT_LOW_STOCK_THRESHOLD,
    DEFAULT_REQUIRED_QUANTITY,
)
from inventory_service.application.schemas import (
    InventoryItemCreate,
    InventoryItemRead,
    QuantityAdjustment,
    StockCheckResponse,
)

router = APIRouter(prefix="/api/inventory", tags=["inventory"])

def get_inventory_service(db: Session = Depends(get_db)) -> InventoryService:
    return InventoryService(InventoryRepository(db))

@router.get("", response_model=list[InventoryItemRead])
def list_inventory_items(service: InventoryService = Depends(get_inventory_service)):
    return service.get_all_inventory_items()

# Fixed paths are declared before /{item_id} so they are not parsed as ids
@router.get("/low-stock", response_model=list[InventoryItemRead])
def get_low_stock_items(
    threshold: int = Query(DEFAULT_LOW_STOCK_THRESHOLD, description="Items with quantity below this are returned"),
    service: InventoryService = Depends(get_inventory_service),
):
    return service.get_low_stock_items(threshold)

@router.get("/check-stock/{product_code}", response_model=StockCheckResponse)
def check_stock(
    product_code: str,
    quantity: int = Query(DEFAULT_REQUIRED_QUANTITY, description="Units required"),
    service: InventoryService = Depends(get_inventory_service),
):
    return StockCheckResponse(in_stock=service.is_in_stock(product_code, quantity))

@router.get("/product-code/{product_code}", response_model=InventoryItemRead)
def get_inventory_item_by_product_code(product_code: str, service: InventoryService = Depends(get_inventory_service)):
    return service.get_inventory_item_by_product_code(product_code)

@router.get("/product/{product_id}", response_model=list[InventoryItemRead])
def get_inventory_items_by_product_id(product_id: int, service: InventoryService = Depends(get_inventory_service)):
    return service.get_inventory_items_by_product_id(product_id)

@router.get("/warehouse/{warehouse_location}", response_model=list[InventoryItemRead])
def get_inventory_items_by_warehouse(warehouse_location: str, service: InventoryService = Depends(get_inventory_service)):
    return service.get_inventory_items_by_warehouse_location(warehouse_location)

@router.patch("/quantity/{product_code}", response_model=InventoryItemRead)
def update_inventory_quantity(
    product_code: str,
    payload: QuantityAdjustment,
    service: InventoryService = Depends(get_inventory_service),
):
    if payload.quantity_change is None:
        raise InvalidArgumentError("quantityChange is required")
    return service.update_inventory_quantity(product_code, payload.quantity_change)

@router.get("/{item_id}", response_model=InventoryItemRead)
def get_inventory_item(item_id: int, service: InventoryService = Depends(get_inventory_service)):
    return service.get_inventory_item_by_id(item_id)

@router.post("", response_model=InventoryItemRead, status_code=201)
def create_inventory_item(payload: InventoryItemCreate, service: InventoryService = Depends(get_inventory_service)):
    return service.create_inventory_item(payload)

@router.put("/{item_id}", response_model=InventoryItemRead)
def update_inventory_item(item_id: int, payload: InventoryItemCreate, service: InventoryService = Depends(get_inventory_service)):
    return service.update_inventory_item(item_id, payload)

@router.delete("/{item_id}", status_code=204)
def delete_inventory_item(item_id: int, service: InventoryService = Depends(get_inventory_service)):
    service.delete_inventory_item(item_id)
    return Response(status_code=204)
