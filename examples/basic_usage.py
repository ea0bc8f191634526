#!/usr/bin/env python3
"""
Basic usage examples for dynamodb-helpers.

Demonstrates:
1. Building a client from configuration (aborting if that is impossible)
2. Scanning a whole table with a deadline
3. Paginated query with a total count
4. GetItem on a missing key raising ItemNotFoundError

Set TABLE_NAME (and optionally PRIMARY_KEY) before running. The table is
expected to use "primaryKey"/"sortKey" as its key attributes.
"""

import logging
import os
import sys

from dynamodb_helpers import (
    ConnectionError,
    DynamoDBConfig,
    ItemNotFoundError,
    PaginationError,
    PaginationOptions,
    create_client,
    marshal_item,
)

logger = logging.getLogger(__name__)


def main():
    """Run the examples against TABLE_NAME."""
    logging.basicConfig(level=logging.INFO)
    table_name = os.environ["TABLE_NAME"]

    # 1. Build the client; without one nothing else can run
    print("1. Creating DynamoDB client...")
    config = DynamoDBConfig.from_env()

    # For DynamoDB Local, you might use:
    # config = DynamoDBConfig.for_local_development()

    try:
        ddb = create_client(config)
    except ConnectionError as e:
        logger.critical(f"Unable to create DynamoDB client: {e}")
        sys.exit(1)

    # 2. Scan all items, giving up after five seconds
    print("2. Scanning all items...")
    for item in ddb.scan_all(timeout=5.0, TableName=table_name):
        print(f"Item: {item}")

    # 3. Query with pagination
    print("3. Paginated query...")
    options = PaginationOptions(
        skip=0,
        limit=3,
        query={
            'TableName': table_name,
            'KeyConditionExpression': '#pk = :pk',
            'ExpressionAttributeNames': {'#pk': 'primaryKey'},
            'ExpressionAttributeValues': {
                ':pk': {'S': os.getenv("PRIMARY_KEY", "<your-primary-key>")}
            },
        }
    )
    try:
        result = ddb.query_with_pagination(options)
    except PaginationError as e:
        logger.error(f"Paginated query failed:\n{e}")
        sys.exit(1)

    print(f"Paginated results: {result.count}")
    for item in result.items:
        print(f"Paginated: {item}")

    # 4. This key does not exist
    print("4. Fetching a missing item...")
    key = marshal_item({
        'primaryKey': 'no-exist',
        'sortKey': 'no-exist',
    })
    try:
        ddb.get_one(TableName=table_name, Key=key)
    except ItemNotFoundError as e:
        print(f"Error: {e}")


if __name__ == "__main__":
    main()
