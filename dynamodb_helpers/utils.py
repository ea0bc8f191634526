"""
dynamodb-helpers utilities.

- Attribute value marshalling between plain Python values and the DynamoDB
  tagged-union form ({"S": ...}, {"N": ...}, {"M": {...}}, ...)
- Request helpers for cursor-driven loops
- Deadline tracking for looping operations
"""

import logging
import time
from datetime import datetime
from decimal import Decimal
from typing import Any, Dict, Mapping, Optional

from boto3.dynamodb.types import TypeDeserializer, TypeSerializer

from .exceptions import DeadlineExceededError, ValidationError

logger = logging.getLogger(__name__)

Item = Dict[str, Dict[str, Any]]

_serializer = TypeSerializer()
_deserializer = TypeDeserializer()


# =============================================================================
# Attribute Value Marshalling
# =============================================================================

def _to_dynamodb_value(obj: Any) -> Any:
    # TypeSerializer rejects floats and datetimes
    if isinstance(obj, Mapping):
        return {k: _to_dynamodb_value(v) for k, v in obj.items()}
    elif isinstance(obj, (list, tuple)):
        return [_to_dynamodb_value(v) for v in obj]
    elif isinstance(obj, bool):
        return obj
    elif isinstance(obj, float):
        return Decimal(str(obj))
    elif isinstance(obj, datetime):
        return obj.isoformat()
    return obj


def marshal_item(values: Mapping[str, Any]) -> Item:
    """Convert a plain mapping into a DynamoDB item of attribute values.

    Floats become ``N`` via Decimal and datetimes are stored as ISO strings.

    Example:
        >>> marshal_item({'primaryKey': 'a', 'count': 3})
        {'primaryKey': {'S': 'a'}, 'count': {'N': '3'}}

    Raises:
        ValidationError: If a value has no DynamoDB representation
    """
    try:
        return {k: _serializer.serialize(_to_dynamodb_value(v)) for k, v in values.items()}
    except TypeError as e:
        logger.error(f"Failed to marshal item: {e}")
        raise ValidationError(f"Failed to marshal item: {e}", original_error=e) from e


def unmarshal_item(item: Item) -> Dict[str, Any]:
    """Convert a DynamoDB item back into plain Python values.

    Numbers come back as Decimal and sets as Python sets.
    """
    return {k: _deserializer.deserialize(v) for k, v in item.items()}


# =============================================================================
# Request Helpers
# =============================================================================

def with_cursor(request: Mapping[str, Any], cursor: Optional[Item]) -> Dict[str, Any]:
    """Return a copy of ``request`` positioned at ``cursor``.

    A ``None`` cursor removes ExclusiveStartKey, since botocore rejects an
    explicit null.
    """
    page_request = dict(request)
    if cursor is None:
        page_request.pop('ExclusiveStartKey', None)
    else:
        page_request['ExclusiveStartKey'] = cursor
    return page_request


# =============================================================================
# Deadlines
# =============================================================================

class Deadline:
    """Wall-clock budget shared by every request of one operation.

    A ``None`` timeout never expires.
    """

    def __init__(self, timeout_seconds: Optional[float] = None):
        self.timeout_seconds = timeout_seconds
        self._expires_at = None if timeout_seconds is None else time.monotonic() + timeout_seconds

    @property
    def expired(self) -> bool:
        return self._expires_at is not None and time.monotonic() >= self._expires_at

    def check(self, operation: str) -> None:
        """Raise DeadlineExceededError if the budget is spent."""
        if self.expired:
            logger.debug(f"Deadline of {self.timeout_seconds}s exceeded before {operation}")
            raise DeadlineExceededError(operation, self.timeout_seconds)
