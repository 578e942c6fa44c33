from typing import Annotated, Any

from fastapi import APIRouter, Body, Depends, HTTPException, Query, status

from . import orders_controller, security
from .models import CurrentUser, DeleteResult, OrderStatus, UpdateResult

router = APIRouter(tags=["orders"])


def serialize_order(order: dict[str, Any]) -> dict[str, Any]:
    """Make a stored order JSON friendly (ObjectId -> str)."""
    data = dict(order)
    if "_id" in data:
        data["_id"] = str(data["_id"])
    return data


@router.post("/orders", status_code=status.HTTP_201_CREATED)
def create_order(
    order: Annotated[dict[str, Any], Body()],
    current_user: Annotated[CurrentUser, Depends(security.get_current_user)],
) -> dict:
    """Create an order. Only waiters may do this."""
    created = orders_controller.create_order(order, current_user)
    return serialize_order(created)


@router.get("/orders")
def list_orders(
    current_user: Annotated[CurrentUser, Depends(security.get_current_user)],
    order_status: OrderStatus | None = Query(None, alias="status", description="Only orders in this status"),
) -> list[dict]:
    orders = orders_controller.get_orders(order_status.value if order_status else None)
    return [serialize_order(order) for order in orders]


@router.get("/orders/{order_id}")
def get_order(
    order_id: str,
    current_user: Annotated[CurrentUser, Depends(security.get_current_user)],
) -> dict:
    order = orders_controller.get_order_by_id(order_id)
    if order is None:
        raise HTTPException(status_code=404, detail="Order not found")
    return serialize_order(order)


@router.put("/orders/{order_id}", response_model=UpdateResult)
@router.patch("/orders/{order_id}", response_model=UpdateResult)
def update_order(
    order_id: str,
    patch: Annotated[dict[str, Any], Body()],
    current_user: Annotated[CurrentUser, Depends(security.get_current_user)],
):
    """Merge the given fields into the stored order."""
    result = orders_controller.update_order(order_id, patch)
    return UpdateResult(matchedCount=result.matched_count, modifiedCount=result.modified_count)


@router.delete("/orders/{order_id}", response_model=DeleteResult)
def delete_order(
    order_id: str,
    current_user: Annotated[CurrentUser, Depends(security.get_current_user)],
):
    result = orders_controller.delete_order(order_id)
    if result.deleted_count == 0:
        raise HTTPException(status_code=404, detail="Order not found")
    return DeleteResult(deletedCount=result.deleted_count)
