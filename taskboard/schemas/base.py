from typing import Any, Dict, Generic, TypeVar

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

DataT = TypeVar("DataT")


class CamelModel(BaseModel):
    """camelCase on the wire, snake_case in Python; both accepted on input."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )


class RequestModel(CamelModel):
    """Request bodies reject fields they do not declare."""

    model_config = ConfigDict(extra="forbid")


class Envelope(CamelModel, Generic[DataT]):
    """Wrapper for every successful response."""

    data: DataT
    status_code: int


def envelope(data: Any, status_code: int = 200) -> Dict[str, Any]:
    return {"data": data, "statusCode": status_code}
