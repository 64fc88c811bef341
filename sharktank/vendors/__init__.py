"""
vendors/__init__.py
====================
Public surface of the vendors package.

    from ...vendors import DynamoDBTable
"""

from .aws.dynamodb_table import DynamoDBTable

__all__ = ["DynamoDBTable"]
