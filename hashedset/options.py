"""
Construction options for HashedSet, validated with pydantic.
"""
from pydantic import BaseModel, ConfigDict, Field, ValidationError

from .errors import ArgumentOutOfRangeError

DEFAULT_CAPACITY = 5


class SetOptions(BaseModel):
    """
    Options a HashedSet is built with.
    capacity is the initial number of buckets and must be positive.
    """
    model_config = ConfigDict(frozen=True)

    capacity: int = Field(default=DEFAULT_CAPACITY, gt=0)


def set_options(capacity: int | None = None) -> SetOptions:
    """
    Builds validated SetOptions, falling back to the defaults for
    anything not supplied.
    """
    if capacity is None:
        return SetOptions()
    try:
        return SetOptions(capacity=capacity)
    except ValidationError as ex:
        raise ArgumentOutOfRangeError(
            "capacity", f"must be a positive integer, got {capacity!r}"
        ) from ex
