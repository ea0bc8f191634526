"""
Domain exceptions for dynamodb-helpers.

Organized by category:
1. Validation Errors
2. Not Found Errors
3. Query and Pagination Errors
4. Infrastructure Errors
"""

from typing import Any, Dict, List, Optional

from .base import DynamoDBHelperError


# =============================================================================
# Validation Errors
# =============================================================================

class ValidationError(DynamoDBHelperError):
    """Raised when pagination options or other inputs fail validation."""

    def __init__(self, message: str, errors: Optional[Any] = None, original_error: Optional[Exception] = None):
        """Initialize validation error.

        Args:
            message: Human-readable error message
            errors: Field-level validation errors (pydantic ``errors()`` output)
            original_error: The original exception that caused this error
        """
        self.errors = errors or []
        context = {
            'validation_errors': self.errors
        }
        super().__init__(message, original_error, context)


# =============================================================================
# Not Found Errors
# =============================================================================

class ItemNotFoundError(DynamoDBHelperError):
    """Raised when GetItem returns no item for the requested key.

    Callers branch on this type to tell "no such item" apart from every
    other failure.
    """

    def __init__(self, table_name: Optional[str], key: Optional[dict], original_error: Optional[Exception] = None):
        """Initialize item not found error.

        Args:
            table_name: Name of the DynamoDB table
            key: The key that was not found
            original_error: The original exception that caused this error
        """
        self.table_name = table_name
        self.key = key
        message = f"Item not found in table '{table_name}' with key: {key}"
        context = {
            'table_name': table_name,
            'key': key
        }
        super().__init__(message, original_error, context)


# =============================================================================
# Query and Pagination Errors
# =============================================================================

class QueryError(DynamoDBHelperError):
    """A single failed sub-operation of a paginated query.

    The message carries the call context ("error querying dynamo",
    "error getting query count") followed by the underlying failure.
    """

    def __init__(self, message: str, original_error: Optional[Exception] = None):
        if original_error is not None:
            message = f"{message}: {original_error}"
        super().__init__(message, original_error)


class PaginationError(DynamoDBHelperError):
    """Raised by query_with_pagination when one or both concurrent tasks fail.

    Every task failure is kept in ``errors``, in task order (fetch, then
    count), and the message joins them one per line.
    """

    def __init__(self, errors: List[Exception]):
        self.errors = list(errors)
        message = "\n".join(str(e) for e in self.errors)
        original_error = self.errors[0] if len(self.errors) == 1 else None
        super().__init__(message, original_error)


class DeadlineExceededError(DynamoDBHelperError):
    """Raised when a looping operation runs past its deadline."""

    def __init__(self, operation: str, timeout_seconds: float):
        self.operation = operation
        self.timeout_seconds = timeout_seconds
        context: Dict[str, Any] = {
            'operation': operation,
            'timeout_seconds': timeout_seconds
        }
        super().__init__(f"Deadline exceeded during {operation}", None, context)


# =============================================================================
# Infrastructure Errors
# =============================================================================

class ConnectionError(DynamoDBHelperError):
    """Raised when the DynamoDB client cannot be constructed.

    Used for:
    - Invalid or missing credentials/profile
    - Unknown region or malformed endpoint configuration
    """

    def __init__(self, message: str, original_error: Optional[Exception] = None, context: Optional[Dict[str, Any]] = None):
        super().__init__(message, original_error, context)
