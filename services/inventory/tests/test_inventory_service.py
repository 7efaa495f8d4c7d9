import pytest

from shared.core import ErrorKind, InvalidArgumentError, ResourceNotFoundError
from inventory_service.application.schemas import InventoryItemCreate
from inventory_service.domain.models import MAX_QUANTITY


def test_create_then_get_by_id_round_trip(inventory_service):
    created = inventory_service.create_inventory_item(
        InventoryItemCreate(product_code="PROD-010", quantity=7, warehouse_location="B-2", product_id=42)
    )
    fetched = inventory_service.get_inventory_item_by_id(created.id)
    assert (fetched.id, fetched.product_code, fetched.quantity, fetched.warehouse_location, fetched.product_id) == \
        (created.id, "PROD-010", 7, "B-2", 42)


def test_get_by_id_missing_raises_not_found(inventory_service):
    with pytest.raises(ResourceNotFoundError) as exc_info:
        inventory_service.get_inventory_item_by_id(999)
    assert exc_info.value.kind == ErrorKind.NOT_FOUND
    assert exc_info.value.message == "Inventory item not found with id: 999"


def test_get_by_product_code(inventory_service, make_item):
    item = make_item()
    assert inventory_service.get_inventory_item_by_product_code("PROD-001").id == item.id


def test_get_by_product_code_missing_raises_not_found(inventory_service):
    with pytest.raises(ResourceNotFoundError, match="product code: NOPE"):
        inventory_service.get_inventory_item_by_product_code("NOPE")


def test_lookups_by_product_id_and_warehouse(inventory_service, make_item):
    make_item("PROD-001", product_id=1, warehouse_location="A")
    make_item("PROD-002", product_id=1, warehouse_location="B")
    make_item("PROD-003", product_id=2, warehouse_location="A")

    by_product = inventory_service.get_inventory_items_by_product_id(1)
    assert sorted(i.product_code for i in by_product) == ["PROD-001", "PROD-002"]

    by_warehouse = inventory_service.get_inventory_items_by_warehouse_location("A")
    assert sorted(i.product_code for i in by_warehouse) == ["PROD-001", "PROD-003"]


def test_update_replaces_every_field(inventory_service, make_item):
    item = make_item()
    updated = inventory_service.update_inventory_item(
        item.id,
        InventoryItemCreate(product_code="PROD-001B", quantity=3, warehouse_location=None, product_id=9),
    )
    assert updated.product_code == "PROD-001B"
    assert updated.quantity == 3
    assert updated.warehouse_location is None
    assert updated.product_id == 9


def test_update_missing_raises_not_found(inventory_service):
    with pytest.raises(ResourceNotFoundError):
        inventory_service.update_inventory_item(
            5, InventoryItemCreate(product_code="X", quantity=1, product_id=1)
        )


def test_delete_removes_item(inventory_service, make_item):
    item = make_item()
    inventory_service.delete_inventory_item(item.id)
    assert inventory_service.get_all_inventory_items() == []
    with pytest.raises(ResourceNotFoundError):
        inventory_service.delete_inventory_item(item.id)


def test_adjust_quantity_persists_sum(inventory_service, make_item):
    make_item(quantity=10)
    updated = inventory_service.update_inventory_quantity("PROD-001", 5)
    assert updated.quantity == 15
    assert inventory_service.get_inventory_item_by_product_code("PROD-001").quantity == 15


def test_adjust_quantity_below_zero_leaves_stored_value(inventory_service, make_item):
    make_item(quantity=10)
    with pytest.raises(InvalidArgumentError, match="Cannot reduce quantity below zero") as exc_info:
        inventory_service.update_inventory_quantity("PROD-001", -11)
    assert exc_info.value.kind == ErrorKind.INVALID_ARGUMENT
    assert inventory_service.get_inventory_item_by_product_code("PROD-001").quantity == 10


def test_adjust_quantity_past_column_limit_leaves_stored_value(inventory_service, make_item):
    make_item(quantity=MAX_QUANTITY)
    with pytest.raises(InvalidArgumentError, match="Quantity cannot exceed"):
        inventory_service.update_inventory_quantity("PROD-001", 1)
    assert inventory_service.get_inventory_item_by_product_code("PROD-001").quantity == MAX_QUANTITY


def test_adjust_quantity_unknown_code_raises_not_found(inventory_service):
    with pytest.raises(ResourceNotFoundError):
        inventory_service.update_inventory_quantity("NOPE", 1)


def test_stock_scenario_drain_to_zero(inventory_service, make_item):
    make_item("PROD-001", quantity=10)

    with pytest.raises(InvalidArgumentError):
        inventory_service.update_inventory_quantity("PROD-001", -15)
    assert inventory_service.get_inventory_item_by_product_code("PROD-001").quantity == 10

    assert inventory_service.update_inventory_quantity("PROD-001", -10).quantity == 0
    assert inventory_service.is_in_stock("PROD-001", 1) is False


@pytest.mark.parametrize("required, expected", [(1, True), (9, True), (10, True), (11, False)])
def test_is_in_stock_compares_against_quantity(inventory_service, make_item, required, expected):
    make_item(quantity=10)
    assert inventory_service.is_in_stock("PROD-001", required) is expected


@pytest.mark.parametrize("required", [0, 1, 1000])
def test_is_in_stock_unknown_code_is_false(inventory_service, required):
    assert inventory_service.is_in_stock("UNKNOWN", required) is False


def test_is_in_stock_defaults_to_one_unit(inventory_service, make_item):
    make_item("EMPTY", quantity=0)
    make_item("ONE", quantity=1)
    assert inventory_service.is_in_stock("EMPTY") is False
    assert inventory_service.is_in_stock("ONE") is True


def test_low_stock_returns_items_below_threshold(inventory_service, make_item):
    for code, qty in [("A", 0), ("B", 4), ("C", 5), ("D", 20)]:
        make_item(code, quantity=qty)

    assert sorted(i.product_code for i in inventory_service.get_low_stock_items()) == ["A", "B"]
    assert sorted(i.product_code for i in inventory_service.get_low_stock_items(6)) == ["A", "B", "C"]
    assert inventory_service.get_low_stock_items(0) == []
