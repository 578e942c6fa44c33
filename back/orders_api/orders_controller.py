"""Orders controller.

Every operation opens its own connection through `get_database()`, runs a
single collection call and closes the connection before returning. Database
errors are not caught here; callers see the driver's exception unchanged.
"""
import logging
from datetime import datetime, timezone
from typing import Annotated, Any

from bson import ObjectId
from bson.errors import InvalidId
from pydantic import Field, TypeAdapter
from pydantic import ValidationError as SchemaError
from pymongo.results import DeleteResult, UpdateResult

from .db import get_database
from .errors import NotFoundError, ValidationError
from .models import CurrentUser, OrderItem, OrderStatus
from .permissions import Permissions, require_permission
from .settings import settings

logger = logging.getLogger(__name__)

WAITERS_ONLY_MESSAGE = "Access denied. Only waiters can create orders."

# Checked whenever the field is present and not None, on create and update.
FIELD_VALIDATORS = {
    "items": TypeAdapter(Annotated[list[OrderItem], Field(min_length=1)]),
    "total": TypeAdapter(Annotated[float, Field(ge=0, strict=True)]),
    "status": TypeAdapter(OrderStatus),
}


def _orders(db):
    return db.get_collection(settings.orders_collection)


def to_object_id(order_id: str) -> ObjectId:
    try:
        return ObjectId(order_id)
    except (InvalidId, TypeError):
        raise ValidationError(f"Invalid order id '{order_id}'.")


def validate_required_fields(document: dict[str, Any], fields: list[str]) -> None:
    """Raise ValidationError naming the first field that is missing or None."""
    for field in fields:
        if document.get(field) is None:
            raise ValidationError(f"Property '{field}' must not be null or undefined.")


def validate_field_values(document: dict[str, Any]) -> None:
    for field, adapter in FIELD_VALIDATORS.items():
        value = document.get(field)
        if value is None:
            continue
        try:
            adapter.validate_python(value)
        except SchemaError:
            raise ValidationError(f"Property '{field}' is invalid.")


def create_order(order: dict[str, Any], user: CurrentUser) -> dict[str, Any]:
    require_permission(user, Permissions.ORDERS_CREATE, WAITERS_ONLY_MESSAGE)
    validate_required_fields(order, settings.required_order_fields)
    validate_field_values(order)

    document = dict(order)
    document.setdefault("status", OrderStatus.pending.value)
    document.setdefault("dateEntry", datetime.now(timezone.utc))

    with get_database() as db:
        result = _orders(db).insert_one(document)

    document["_id"] = result.inserted_id
    logger.info("Order %s created", result.inserted_id)
    return document


def get_orders(status: str | None = None) -> list[dict[str, Any]]:
    query = {} if status is None else {"status": status}
    with get_database() as db:
        orders = list(_orders(db).find(query))
    logger.debug("Fetched %d orders", len(orders))
    return orders


def get_order_by_id(order_id: str) -> dict[str, Any] | None:
    with get_database() as db:
        order = _orders(db).find_one({"_id": to_object_id(order_id)})
    logger.debug("Order %s %s", order_id, "found" if order is not None else "not found")
    return order


def update_order(order_id: str, patch: dict[str, Any]) -> UpdateResult:
    if "_id" in patch:
        raise ValidationError("Property '_id' cannot be changed.")
    required = settings.required_order_fields
    validate_required_fields(patch, [field for field in required if field in patch])
    validate_field_values(patch)

    changes = dict(patch)
    if changes.get("status") == OrderStatus.delivered.value and "dateProcessed" not in changes:
        changes["dateProcessed"] = datetime.now(timezone.utc)

    with get_database() as db:
        result = _orders(db).update_one(
            {"_id": to_object_id(order_id)},
            {"$set": changes},
        )

    if result.matched_count == 0:
        raise NotFoundError("Order not found")
    logger.info("Order %s updated", order_id)
    return result


def delete_order(order_id: str) -> DeleteResult:
    with get_database() as db:
        result = _orders(db).delete_one({"_id": to_object_id(order_id)})
    logger.info("Order %s deleted (%d removed)", order_id, result.deleted_count)
    return result
