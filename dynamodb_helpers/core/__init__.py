"""
Core DynamoDB operations.

- DynamoDB: thin wrapper over a boto3 low-level client
- QueryPaginator: concurrent skip/limit pagination with a total count
- create_client: builds a DynamoDB wrapper from DynamoDBConfig
"""

from .client import DynamoDB, configure_logging, create_client
from .pagination import QueryPaginator

__all__ = [
    "DynamoDB",
    "QueryPaginator",
    "configure_logging",
    "create_client",
]
