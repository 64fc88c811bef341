"""
DynamoDB Deals Table

Handles:
    - Full table scan (follows LastEvaluatedKey)
    - Put item (overwrites on same key)
    - Decimal <-> int/float conversion
"""

# Python Packages
import logging
from decimal import Decimal

import boto3

# Constants
from ...base import constants

logger = logging.getLogger(__name__)





class DynamoDBTable:
    """
    AWS DynamoDB operations on the deals table
    """

    def __init__(self, table = None):
        """
        Initialize table resource using environment constants

        Args:
            table: Optional boto3 Table (or compatible fake) to use instead
        """

        self.table_name = constants.DYNAMODB_TABLE

        if table is None:
            resource = boto3.resource(
                "dynamodb",
                aws_access_key_id = constants.AWS_ACCESS_KEY_ID,
                aws_secret_access_key = constants.AWS_SECRET_ACCESS_KEY,
                region_name = constants.AWS_REGION
            )
            table = resource.Table(self.table_name)

        self.table = table


    # ---------------------------------------------------------
    # 🔹 Scan
    # ---------------------------------------------------------
    def scan_all(self) -> list:
        """
        Read every item in the table

        A single Scan call stops at 1MB; keep scanning from
        LastEvaluatedKey until the table is exhausted.

        Returns:
            list: items with numbers as int/float
        """

        items = []
        params = {}

        while True:
            logger.info("[getDeals] Scan params: %s", {"TableName": self.table_name, **params})
            response = self.table.scan(**params)

            items.extend(to_python(item) for item in response.get("Items", []))

            last_key = response.get("LastEvaluatedKey")
            if not last_key:
                break

            params["ExclusiveStartKey"] = last_key

        return items


    # ---------------------------------------------------------
    # 🔹 Put
    # ---------------------------------------------------------
    def put(self, item: dict):
        """
        Write an item, replacing any item with the same key

        None values are dropped and floats become Decimal, as
        DynamoDB rejects both.
        """

        cleaned = to_dynamo({k: v for k, v in item.items() if v is not None})

        logger.info("[createDeal] PutItem params: %s", {"TableName": self.table_name, "Item": cleaned})
        self.table.put_item(Item = cleaned)



def to_python(value):
    """ Convert DynamoDB Decimals (recursively) into int or float... """

    if isinstance(value, Decimal):
        return int(value) if value == value.to_integral_value() else float(value)

    if isinstance(value, dict):
        return {k: to_python(v) for k, v in value.items()}

    if isinstance(value, (list, tuple)):
        return [to_python(v) for v in value]

    if isinstance(value, set):
        return sorted(to_python(v) for v in value)

    return value



def to_dynamo(value):
    """ Convert floats (recursively) into Decimal for boto3... """

    if isinstance(value, bool):
        return value

    if isinstance(value, float):
        return Decimal(str(value))

    if isinstance(value, dict):
        return {k: to_dynamo(v) for k, v in value.items() if v is not None}

    if isinstance(value, (list, tuple)):
        return [to_dynamo(v) for v in value]

    return value
