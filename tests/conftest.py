"""
Test configuration and fixtures for dynamodb-helpers.

Provides stubbed boto3 clients for unit tests and a moto-backed table for
integration tests.
"""

from unittest.mock import Mock

import boto3
import pytest
from moto import mock_aws

from dynamodb_helpers import DynamoDB, DynamoDBConfig
from helpers import TABLE_NAME, make_items, make_page


@pytest.fixture
def mock_config():
    """DynamoDB configuration for testing."""
    return DynamoDBConfig(
        aws_access_key_id="test_key",
        aws_secret_access_key="test_secret",
        aws_session_token=None,
        profile_name=None,
        region_name="us-east-1",
        endpoint_url=None,
        enable_debug_logging=False
    )


@pytest.fixture
def mock_client():
    """Stub boto3 DynamoDB client."""
    client = Mock()
    client.get_item.return_value = {}
    client.put_item.return_value = {}
    client.update_item.return_value = {'Attributes': {}}
    client.delete_item.return_value = {}
    client.query.return_value = make_page([])
    client.scan.return_value = make_page([])
    return client


@pytest.fixture
def ddb(mock_client):
    """DynamoDB wrapper around the stub client."""
    return DynamoDB(mock_client)


@pytest.fixture
def moto_client():
    """boto3 DynamoDB client backed by moto."""
    with mock_aws():
        yield boto3.client(
            'dynamodb',
            region_name='us-east-1',
            aws_access_key_id='test_key',
            aws_secret_access_key='test_secret'
        )


@pytest.fixture
def items_table(moto_client):
    """Create the items table with 10 items for customer-1 and 2 for customer-2."""
    moto_client.create_table(
        TableName=TABLE_NAME,
        KeySchema=[
            {'AttributeName': 'primaryKey', 'KeyType': 'HASH'},
            {'AttributeName': 'sortKey', 'KeyType': 'RANGE'}
        ],
        AttributeDefinitions=[
            {'AttributeName': 'primaryKey', 'AttributeType': 'S'},
            {'AttributeName': 'sortKey', 'AttributeType': 'S'}
        ],
        BillingMode='PAY_PER_REQUEST'
    )
    for item in make_items(10) + make_items(2, pk='customer-2'):
        moto_client.put_item(TableName=TABLE_NAME, Item=item)
    return TABLE_NAME


@pytest.fixture
def moto_ddb(moto_client, items_table):
    """DynamoDB wrapper around the moto client with the items table loaded."""
    return DynamoDB(moto_client)


@pytest.fixture
def customer_query():
    """Query request for every customer-1 item."""
    return {
        'TableName': TABLE_NAME,
        'KeyConditionExpression': '#pk = :pk',
        'ExpressionAttributeNames': {'#pk': 'primaryKey'},
        'ExpressionAttributeValues': {':pk': {'S': 'customer-1'}},
    }
