"""
Tests for utils.py: attribute value marshalling, request helpers and deadlines.
"""

from datetime import datetime, timezone
from decimal import Decimal
from unittest.mock import patch

import pytest

from dynamodb_helpers.exceptions import DeadlineExceededError, ValidationError
from dynamodb_helpers.utils import Deadline, marshal_item, unmarshal_item, with_cursor
from helpers import make_key


class TestMarshalling:
    """Test conversion to and from the DynamoDB tagged-union form."""

    def test_marshal_key(self):
        """Test a plain key mapping becomes string attribute values."""
        assert marshal_item({'primaryKey': 'no-exist', 'sortKey': 'no-exist'}) == {
            'primaryKey': {'S': 'no-exist'},
            'sortKey': {'S': 'no-exist'},
        }

    def test_marshal_value_kinds(self):
        item = marshal_item({
            'name': 'widget',
            'qty': 3,
            'price': 9.99,
            'active': True,
            'deleted': None,
            'blob': b'\x00\x01',
            'tags': ['a', 1],
            'dims': {'w': 2},
            'labels': {'red', 'blue'},
            'created_at': datetime(2024, 1, 1, tzinfo=timezone.utc),
        })

        assert item['name'] == {'S': 'widget'}
        assert item['qty'] == {'N': '3'}
        assert item['price'] == {'N': '9.99'}
        assert item['active'] == {'BOOL': True}
        assert item['deleted'] == {'NULL': True}
        assert item['blob']['B'] == b'\x00\x01'
        assert item['tags'] == {'L': [{'S': 'a'}, {'N': '1'}]}
        assert item['dims'] == {'M': {'w': {'N': '2'}}}
        assert sorted(item['labels']['SS']) == ['blue', 'red']
        assert item['created_at'] == {'S': '2024-01-01T00:00:00+00:00'}

    def test_marshal_unsupported_type(self):
        with pytest.raises(ValidationError, match="Failed to marshal item"):
            marshal_item({'bad': object()})

    def test_unmarshal_item(self):
        values = unmarshal_item({
            'primaryKey': {'S': 'customer-1'},
            'total': {'N': '10'},
            'tags': {'SS': ['x']},
            'nested': {'M': {'ok': {'BOOL': False}}},
        })

        assert values == {
            'primaryKey': 'customer-1',
            'total': Decimal('10'),
            'tags': {'x'},
            'nested': {'ok': False},
        }


class TestWithCursor:
    """Test with_cursor request copies."""

    def test_sets_cursor_on_copy(self):
        request = {'TableName': 'items'}

        page_request = with_cursor(request, make_key('order-01'))

        assert page_request == {'TableName': 'items', 'ExclusiveStartKey': make_key('order-01')}
        assert request == {'TableName': 'items'}

    def test_none_cursor_removes_start_key(self):
        request = {'TableName': 'items', 'ExclusiveStartKey': make_key('order-01')}

        assert with_cursor(request, None) == {'TableName': 'items'}
        assert 'ExclusiveStartKey' in request


class TestDeadline:
    """Test Deadline."""

    def test_no_timeout_never_expires(self):
        deadline = Deadline()

        assert deadline.expired is False
        deadline.check("Scan")

    def test_expires_after_timeout(self):
        with patch('dynamodb_helpers.utils.time.monotonic', return_value=100.0):
            deadline = Deadline(5.0)

        with patch('dynamodb_helpers.utils.time.monotonic', return_value=104.9):
            assert deadline.expired is False

        with patch('dynamodb_helpers.utils.time.monotonic', return_value=105.0):
            with pytest.raises(DeadlineExceededError) as exc_info:
                deadline.check("Query")

        assert exc_info.value.operation == "Query"
        assert exc_info.value.timeout_seconds == 5.0
        assert "Deadline exceeded during Query" in str(exc_info.value)
