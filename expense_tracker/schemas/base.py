from datetime import datetime, timezone
from typing import Annotated
from pydantic import AfterValidator, BaseModel, ConfigDict, Field, PlainSerializer
from pydantic.alias_generators import to_camel


def to_naive_utc(value: datetime) -> datetime:
    """Dates are stored as naive UTC; values without an offset are taken as UTC"""
    if value.tzinfo is None:
        return value
    return value.astimezone(timezone.utc).replace(tzinfo=None)


def utc_isoformat(value: datetime) -> str:
    return to_naive_utc(value).isoformat() + "Z"


UtcDatetime = Annotated[
    datetime,
    AfterValidator(to_naive_utc),
    PlainSerializer(utc_isoformat, return_type=str, when_used="json"),
]


class CamelModel(BaseModel):
    """Base schema speaking camelCase on the wire and snake_case in Python"""
    # String fields take numbers too, e.g. a group id of 17 becomes "17"
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, coerce_numbers_to_str=True)


class RecordOut(CamelModel):
    """Stored record as returned to clients, store identity exposed as `_id`"""
    model_config = ConfigDict(from_attributes=True)

    pk: int = Field(..., serialization_alias="_id")


class MessageOut(BaseModel):
    message: str
