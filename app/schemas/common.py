from decimal import Decimal
from typing import Annotated

from pydantic import BaseModel, PlainSerializer
from pydantic.alias_generators import to_camel


def _plain_decimal(value: Decimal) -> str:
    # SQLite pads NUMERIC to a fixed scale ("0.0500000000", "0E-10")
    return format(value.normalize(), "f")


# NUMERIC value sent as a plain decimal string: "0.05", "0"
PlainDecimal = Annotated[Decimal, PlainSerializer(_plain_decimal, return_type=str, when_used="json")]


class APIModel(BaseModel):
    """
    Base schema for request/response bodies.

    Attributes are snake_case in Python and camelCase on the wire
    (company_handle <-> companyHandle).
    """

    class Config:
        alias_generator = to_camel
        populate_by_name = True
        from_attributes = True


class APIRequest(APIModel):
    """Base schema for request bodies; unknown fields are rejected."""

    class Config:
        extra = "forbid"


class DeletedResponse(BaseModel):
    """Schema for delete responses: the key of the removed record"""
    deleted: str
