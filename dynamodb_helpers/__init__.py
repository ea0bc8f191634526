from .config import DynamoDBConfig
from .exceptions import (
    ConnectionError,
    DeadlineExceededError,
    DynamoDBHelperError,
    ItemNotFoundError,
    PaginationError,
    QueryError,
    ValidationError,
)
from .models import PaginatedResult, PaginationOptions
from .core import DynamoDB, QueryPaginator, create_client
from .utils import marshal_item, unmarshal_item

__version__ = "1.0.0"
__all__ = [
    # Configuration
    "DynamoDBConfig",

    # Exceptions
    "ConnectionError",
    "DeadlineExceededError",
    "DynamoDBHelperError",
    "ItemNotFoundError",
    "PaginationError",
    "QueryError",
    "ValidationError",

    # Pagination models
    "PaginatedResult",
    "PaginationOptions",

    # Client
    "DynamoDB",
    "QueryPaginator",
    "create_client",

    # Attribute values
    "marshal_item",
    "unmarshal_item",
]
