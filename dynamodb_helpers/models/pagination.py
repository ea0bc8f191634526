"""
Pagination models for query_with_pagination.

``limit`` here is the client-side window size: the maximum number of items
accumulated across all pages. It is unrelated to the ``Limit`` key inside
``query``, which is the server page size.
"""

from typing import Any, Dict, List

from pydantic import BaseModel, ConfigDict, Field


class PaginationOptions(BaseModel):
    """A query request plus the client-side skip/limit window."""

    query: Dict[str, Any] = Field(
        ...,
        description="boto3 Query parameters (TableName, KeyConditionExpression, ...)"
    )
    skip: int = Field(
        default=0,
        ge=0,
        description="Items to drop from the front of the limited result"
    )
    limit: int = Field(
        ...,
        ge=0,
        description="Maximum items accumulated across pages before skip is applied"
    )

    model_config = ConfigDict(frozen=True)


class PaginatedResult(BaseModel):
    """Outcome of query_with_pagination.

    ``count`` is the total number of matches reported by a separate
    count-only query; it ignores skip and limit.
    """

    items: List[Dict[str, Any]] = Field(default_factory=list)
    skip: int
    limit: int
    count: int
