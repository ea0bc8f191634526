"""
Test helpers for dynamodb-helpers.

Builders for items and Query/Scan response pages in DynamoDB
attribute-value form.
"""

from typing import Any, Dict, List, Optional

TABLE_NAME = 'test_items'


def make_items(count: int, start: int = 0, pk: str = 'customer-1') -> List[Dict[str, Any]]:
    """Build ``count`` items with ordered sort keys order-<start>.."""
    return [
        {
            'primaryKey': {'S': pk},
            'sortKey': {'S': f'order-{i:02d}'},
            'total': {'N': str(i * 10)},
        }
        for i in range(start, start + count)
    ]


def make_key(sort: str, pk: str = 'customer-1') -> Dict[str, Any]:
    return {'primaryKey': {'S': pk}, 'sortKey': {'S': sort}}


def make_page(items: List[Dict[str, Any]], last_key: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
    """Build a Query/Scan response page."""
    page: Dict[str, Any] = {'Items': items, 'Count': len(items), 'ScannedCount': len(items)}
    if last_key is not None:
        page['LastEvaluatedKey'] = last_key
    return page


__all__ = [
    'TABLE_NAME',
    'make_items',
    'make_key',
    'make_page',
]
