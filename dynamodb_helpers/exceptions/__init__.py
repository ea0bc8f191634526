# Base exception class
from .base import DynamoDBHelperError

from .domain_exceptions import (
    ConnectionError,
    DeadlineExceededError,
    ItemNotFoundError,
    PaginationError,
    QueryError,
    ValidationError,
)

__all__ = [
    # Base exception
    "DynamoDBHelperError",

    # Domain exceptions (alphabetically ordered)
    "ConnectionError",
    "DeadlineExceededError",
    "ItemNotFoundError",
    "PaginationError",
    "QueryError",
    "ValidationError",
]
