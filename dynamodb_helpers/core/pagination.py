"""
Concurrent skip/limit query pagination.

``QueryPaginator`` runs two tasks side by side on a two-worker thread pool:

- fetch: pages through the query, keeping at most ``limit`` items, then
  drops the first ``skip`` of them
- count: one count-only query over the original request

Both tasks always run to completion. If either fails, every failure is
reported together in a single PaginationError.

``skip`` only applies inside the ``limit`` window; it is not a server-side
offset. With limit=5 and skip=7 the result is empty even if the table holds
hundreds of matches.
"""

import logging
from concurrent.futures import ALL_COMPLETED, ThreadPoolExecutor, wait
from typing import Any, Dict, List, Mapping, Optional, Union

from pydantic import ValidationError as PydanticValidationError

from ..exceptions import PaginationError, QueryError, ValidationError
from ..models import PaginatedResult, PaginationOptions
from ..utils import Deadline, Item, with_cursor

logger = logging.getLogger(__name__)


class QueryPaginator:
    """Runs query_with_pagination for a DynamoDB wrapper."""

    def __init__(self, ddb):
        self.ddb = ddb

    @staticmethod
    def _validate(options: Union[PaginationOptions, Mapping[str, Any]]) -> PaginationOptions:
        if isinstance(options, PaginationOptions):
            return options
        try:
            return PaginationOptions.model_validate(options)
        except PydanticValidationError as e:
            raise ValidationError(f"Invalid pagination options: {e}", e.errors(), e) from e

    def run(
        self,
        options: Union[PaginationOptions, Mapping[str, Any]],
        timeout: Optional[float] = None
    ) -> PaginatedResult:
        options = self._validate(options)
        deadline = Deadline(timeout)

        with ThreadPoolExecutor(max_workers=2, thread_name_prefix="ddb-pagination") as executor:
            fetch = executor.submit(self.fetch_window, options.query, options.skip, options.limit, deadline)
            count = executor.submit(self.count, options.query, deadline)
            wait([fetch, count], return_when=ALL_COMPLETED)

        errors: List[Exception] = []
        if fetch.exception() is not None:
            errors.append(QueryError("error querying dynamo", fetch.exception()))
        if count.exception() is not None:
            errors.append(QueryError("error getting query count", count.exception()))

        if errors:
            for error in errors:
                logger.error(f"Paginated query on {options.query.get('TableName')} failed: {error}")
            raise PaginationError(errors)

        return PaginatedResult(
            items=fetch.result(),
            skip=options.skip,
            limit=options.limit,
            count=count.result()
        )

    def fetch_window(self, request: Dict[str, Any], skip: int, limit: int, deadline: Deadline) -> List[Item]:
        """Accumulate up to ``limit`` items across pages, then drop ``skip``.

        The first page is always requested, even when ``limit`` is 0.
        """
        items: List[Item] = []
        cursor = request.get('ExclusiveStartKey')

        while True:
            deadline.check("Query")
            response = self.ddb.client.query(**with_cursor(request, cursor))
            page = response.get('Items', [])

            # truncate the page to the remaining budget
            remaining = limit - len(items)
            items.extend(page[:remaining])

            cursor = response.get('LastEvaluatedKey')
            if cursor is None or len(items) >= limit:
                break

        logger.debug(f"Fetched {len(items)} of limit {limit} from {request.get('TableName')}, skipping {skip}")
        return items[skip:]

    def count(self, request: Dict[str, Any], deadline: Deadline) -> int:
        deadline.check("Query count")
        return self.ddb.get_query_count(**request)
