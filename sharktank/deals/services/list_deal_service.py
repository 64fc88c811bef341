"""
List Deal Service

Handles:
    - Fetch all deals (full table scan)
"""

# Python Packages
import logging

# Vendors
from ...vendors.aws.dynamodb_table import DynamoDBTable

# Exceptions
from ...util.exceptions import ServiceException

# App Messages
from ...util import messages

logger = logging.getLogger(__name__)





class ListDealService:

    def __init__(self, table: DynamoDBTable = None):
        self.table = table or DynamoDBTable()


    def list_deals(self) -> list:
        """
        Fetch every raw deal item

        Items keep the composite 'id'; parsing it into season, episode
        and company is left to the client.

        Returns:
            list
        """

        try:
            items = self.table.scan_all()

        except Exception as errors:
            logger.exception("[getDeals] Error")
            raise ServiceException(
                error_code = "DEALS_FETCH_FAILED",
                message = messages.ERROR["DEALS_FETCH_FAILED"],
                details = str(errors)
            )

        logger.info("[getDeals] Scanned %d items", len(items))
        return items
