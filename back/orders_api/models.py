from enum import Enum

from pydantic import BaseModel, ConfigDict, Field


class OrderStatus(str, Enum):
    pending = "pending"
    preparing = "preparing"
    ready = "ready"
    delivered = "delivered"
    cancelled = "cancelled"


class Role(str, Enum):
    waiter = "waiter"


class CurrentUser(BaseModel):
    """The authenticated caller, as resolved from the access token."""
    email: str | None = None
    role: str


class OrderItem(BaseModel):
    model_config = ConfigDict(extra="allow")

    name: str
    quantity: int = Field(ge=1, strict=True)
    price: float = Field(ge=0, strict=True)


class UpdateResult(BaseModel):
    matchedCount: int
    modifiedCount: int


class DeleteResult(BaseModel):
    deletedCount: int
