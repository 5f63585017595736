"""
Result algebra for the invoice pipeline.

A ``Result`` is exactly one of ``Loading``, ``Success``, ``Empty`` or ``Error``.
Every stage communicates progress with these values instead of raising, and
every consumer handles all four variants.
"""
from typing import Any, Generic, Optional, TypeVar, Union
from pydantic import BaseModel, ConfigDict, field_validator

T = TypeVar("T")


class ResultModel(BaseModel):
    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)


class Loading(ResultModel):
    """The computation has started and produced nothing yet."""


class Success(ResultModel, Generic[T]):
    data: T

    def __init__(self, data: T, **kwargs: Any):
        super().__init__(data=data, **kwargs)

    @field_validator("data")
    @classmethod
    def require_value(cls, v):
        if v is None:
            raise ValueError("Success requires a value")
        return v


class Empty(ResultModel):
    """The operation succeeded but yielded nothing. Not a failure."""
    title: str
    message: str

    def __init__(self, title: str, message: str, **kwargs: Any):
        super().__init__(title=title, message=message, **kwargs)


class Error(ResultModel, Generic[T]):
    message: str
    data: Optional[T] = None

    def __init__(self, message: str, data: Optional[T] = None, **kwargs: Any):
        super().__init__(message=message, data=data, **kwargs)


Result = Union[Loading, Success, Empty, Error]

LOADING = Loading()


def loading() -> Loading:
    return LOADING


def success(data: T) -> Success[T]:
    return Success(data)


def empty(title: str, message: str) -> Empty:
    return Empty(title, message)


def error(message: str, data: Optional[T] = None) -> Error[T]:
    return Error(message, data)
