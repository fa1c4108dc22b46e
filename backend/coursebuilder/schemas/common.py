from typing import Generic, TypeVar

from pydantic import BaseModel
from pydantic.alias_generators import to_camel

T = TypeVar("T")


class CamelModel(BaseModel):
    """Base for payloads exchanged with the SPA: camelCase on the wire."""

    model_config = {"alias_generator": to_camel, "populate_by_name": True}


class Envelope(BaseModel, Generic[T]):
    """Success envelope wrapping every /api payload."""

    success: bool = True
    data: T
