"""
Thin DynamoDB client wrapper.

Wraps an already initialized boto3 low-level ``dynamodb`` client:

1. Pass-through item/query/scan calls: requests and responses are the raw
   boto3 dictionaries, failures propagate unchanged
2. Item helpers that turn an empty GetItem into ItemNotFoundError
3. Cursor loops that drain a scan or query across every page
4. Count-only queries and the concurrent paginated query

Items stay in DynamoDB attribute-value form ({"S": "..."}); use
``marshal_item`` / ``unmarshal_item`` from ``dynamodb_helpers.utils`` to
convert.
"""

import logging
from typing import Any, Dict, List, Mapping, Optional, Union

import boto3

from ..config import DynamoDBConfig
from ..exceptions import ConnectionError, ItemNotFoundError
from ..models import PaginatedResult, PaginationOptions
from ..utils import Deadline, Item, with_cursor
from .pagination import QueryPaginator

logger = logging.getLogger(__name__)

PACKAGE_LOGGER = "dynamodb_helpers"


class DynamoDB:
    """
    Wrapper around a boto3 DynamoDB client.

    The client is injected so callers control session, credentials and
    endpoint; use ``create_client`` to build one from ``DynamoDBConfig``.
    boto3 clients are thread-safe, which query_with_pagination relies on.
    """

    def __init__(self, client: Any):
        """Initialize the wrapper.

        Args:
            client: boto3 low-level DynamoDB client
        """
        self.client = client

    # ------------------------------------------------------------------
    # Pass-through operations
    # ------------------------------------------------------------------

    def get_item(self, **kwargs) -> Dict[str, Any]:
        """GetItem pass-through; returns the raw response."""
        return self.client.get_item(**kwargs)

    def put_item(self, **kwargs) -> Dict[str, Any]:
        """PutItem pass-through; returns the raw response."""
        response = self.client.put_item(**kwargs)
        logger.info(f"Put item in {kwargs.get('TableName')}")
        return response

    def update_item(self, **kwargs) -> Dict[str, Any]:
        """UpdateItem pass-through; returns the raw response."""
        response = self.client.update_item(**kwargs)
        logger.info(f"Updated item in {kwargs.get('TableName')}: {kwargs.get('Key')}")
        return response

    def delete_item(self, **kwargs) -> Dict[str, Any]:
        """DeleteItem pass-through; returns the raw response."""
        response = self.client.delete_item(**kwargs)
        logger.info(f"Deleted item from {kwargs.get('TableName')}: {kwargs.get('Key')}")
        return response

    def query(self, **kwargs) -> Dict[str, Any]:
        """
        Query pass-through; returns a single raw page.

        Example:
            response = ddb.query(
                TableName='orders',
                KeyConditionExpression='#pk = :pk',
                ExpressionAttributeNames={'#pk': 'primaryKey'},
                ExpressionAttributeValues={':pk': {'S': 'customer-1'}},
            )
        """
        return self.client.query(**kwargs)

    def scan(self, **kwargs) -> Dict[str, Any]:
        """Scan pass-through; returns a single raw page."""
        return self.client.scan(**kwargs)

    # ------------------------------------------------------------------
    # Item helpers
    # ------------------------------------------------------------------

    def get_one(self, **kwargs) -> Item:
        """
        Get a single item or raise ItemNotFoundError.

        Args:
            **kwargs: GetItem parameters (TableName, Key, ...)

        Returns:
            The item in attribute-value form

        Raises:
            ItemNotFoundError: If no item exists for the key
        """
        response = self.client.get_item(**kwargs)

        item = response.get('Item')
        if item is None:
            raise ItemNotFoundError(kwargs.get('TableName'), kwargs.get('Key'))

        return item

    def update_if_exists_or_fail(self, **kwargs) -> Dict[str, Any]:
        """
        Update an item only if it currently exists.

        Reads the item with the update's TableName and Key first and only
        issues UpdateItem when the read finds it. The check and the write are
        separate requests, so an item deleted in between is still updated
        (and therefore recreated); use a ConditionExpression when that matters.

        Args:
            **kwargs: UpdateItem parameters

        Returns:
            The raw UpdateItem response

        Raises:
            ItemNotFoundError: If the item does not exist; no update is made
        """
        try:
            self.get_one(TableName=kwargs.get('TableName'), Key=kwargs.get('Key'))
        except ItemNotFoundError:
            logger.warning(f"Skipping update on {kwargs.get('TableName')}, item not found: {kwargs.get('Key')}")
            raise

        return self.update_item(**kwargs)

    # ------------------------------------------------------------------
    # Full-fetch operations
    # ------------------------------------------------------------------

    def scan_all(self, timeout: Optional[float] = None, **kwargs) -> List[Item]:
        """
        Scan every page of a table.

        Follows LastEvaluatedKey until the last page. An ExclusiveStartKey in
        the request is used as the first cursor. The request is not mutated.

        Args:
            timeout: Optional overall budget in seconds, checked before each page
            **kwargs: Scan parameters

        Returns:
            All items, in page order

        Raises:
            DeadlineExceededError: If ``timeout`` elapses between pages
        """
        return self._fetch_all(self.client.scan, "Scan", Deadline(timeout), kwargs)

    def query_all(self, timeout: Optional[float] = None, **kwargs) -> List[Item]:
        """
        Query every page of a result set.

        Same cursor handling as ``scan_all``. A ``Limit`` in the request only
        sets the page size; all matches are returned.
        """
        return self._fetch_all(self.client.query, "Query", Deadline(timeout), kwargs)

    def _fetch_all(self, operation, name: str, deadline: Deadline, request: Mapping[str, Any]) -> List[Item]:
        items: List[Item] = []
        cursor = request.get('ExclusiveStartKey')
        pages = 0

        while True:
            deadline.check(name)
            response = operation(**with_cursor(request, cursor))
            pages += 1
            items.extend(response.get('Items', []))

            cursor = response.get('LastEvaluatedKey')
            if cursor is None:
                break

        logger.debug(f"{name} on {request.get('TableName')} returned {len(items)} items in {pages} pages")
        return items

    def get_query_count(self, timeout: Optional[float] = None, **kwargs) -> int:
        """
        Count the items matching a query.

        Select is always forced to COUNT, so the server returns no items.
        Exactly one request is made; the reported Count is returned as is.

        Args:
            timeout: Optional budget in seconds, checked before the request
            **kwargs: Query parameters
        """
        Deadline(timeout).check("Query count")

        request = dict(kwargs)
        request['Select'] = 'COUNT'

        response = self.client.query(**request)
        count = int(response.get('Count', 0))
        logger.debug(f"Query count on {request.get('TableName')}: {count}")
        return count

    def query_with_pagination(
        self,
        options: Union[PaginationOptions, Mapping[str, Any]],
        timeout: Optional[float] = None
    ) -> PaginatedResult:
        """
        Query a skip/limit window together with the total match count.

        The limited fetch and the count-only query run concurrently. See
        ``QueryPaginator`` for the exact semantics.

        Args:
            options: PaginationOptions, or a mapping with query/skip/limit
            timeout: Optional budget in seconds shared by both tasks

        Returns:
            PaginatedResult with the windowed items and the total count

        Raises:
            ValidationError: If ``options`` is invalid
            PaginationError: If either task fails

        Example:
            result = ddb.query_with_pagination({
                'query': {'TableName': 'orders', 'KeyConditionExpression': ...},
                'skip': 0,
                'limit': 3,
            })
        """
        return QueryPaginator(self).run(options, timeout=timeout)


def configure_logging(config: DynamoDBConfig) -> None:
    """Raise the package logger to DEBUG when debug logging is enabled."""
    if config.enable_debug_logging:
        logging.getLogger(PACKAGE_LOGGER).setLevel(logging.DEBUG)


def create_client(config: Optional[DynamoDBConfig] = None, **client_options) -> DynamoDB:
    """
    Build a DynamoDB wrapper from configuration.

    Args:
        config: Client parameters; read from the environment when None
        **client_options: Extra ``session.client`` arguments, overriding the
            ones derived from ``config`` (e.g. ``endpoint_url``, ``config``)

    Returns:
        DynamoDB wrapping a ready boto3 client

    Raises:
        ConnectionError: If the session or client cannot be created. The
            caller decides whether this is fatal.
    """
    config = config or DynamoDBConfig.from_env()
    configure_logging(config)

    try:
        session = boto3.Session(**config.session_kwargs())
        client_kwargs = config.client_kwargs()
        client_kwargs.update(client_options)
        client = session.client('dynamodb', **client_kwargs)
    except Exception as e:
        logger.error(f"Failed to create DynamoDB client: {e}")
        raise ConnectionError(
            f"Failed to create DynamoDB client: {e}",
            e,
            {'region_name': config.region_name, 'endpoint_url': config.endpoint_url}
        ) from e

    logger.debug(f"Created DynamoDB client for region {config.region_name}")
    return DynamoDB(client)
