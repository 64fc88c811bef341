"""
Create Deal Service

Handles:
    - Build the table item from the request body
    - Put it keyed by 'season#episode#company'
"""

# Python Packages
import logging

# Models
from ...models.deal import compose_deal_id, or_default

# Vendors
from ...vendors.aws.dynamodb_table import DynamoDBTable

# Constants
from ...base import constants

# Exceptions
from ...util.exceptions import ServiceException

# App Messages
from ...util import messages

logger = logging.getLogger(__name__)





class CreateDealService:

    def __init__(self, table: DynamoDBTable = None):
        self.table = table or DynamoDBTable()


    def create_deal(self, body: dict) -> dict:
        """
        Create (or overwrite) a deal

        Args:
            body (dict):
                {
                    "season": int,
                    "episode": int,
                    "company": str,
                    "category": str (optional, default "-"),
                    "closed_deal": bool,
                    "participants": list,
                    "investors": list (optional, default []),
                    "amount_requested": number,
                    "equity_offered": number,
                    "amount_negotiated": number,
                    "equity_negotiated": number,
                    "proposal_type": str (optional, default "-"),
                    "description": str
                }

        Returns:
            dict: the stored item
        """

        item = self.build_item(body)
        logger.info("[createDeal] Item to insert: %s", item)

        try:
            self.table.put(item)

        except Exception as errors:
            logger.exception("[createDeal] Error")
            raise ServiceException(
                error_code = "DEAL_CREATE_FAILED",
                message = messages.ERROR["DEAL_CREATE_FAILED"],
                details = str(errors)
            )

        logger.info("[createDeal] Successfully inserted item %s", item["id"])
        return item


    def build_item(self, body: dict) -> dict:
        """
        Map the request body onto the stored item

        Fields are not validated; absent required fields come through
        as None and are dropped at write time.
        """

        return {
            "id": compose_deal_id(body.get("season"), body.get("episode"), body.get("company")),
            "category": or_default(body.get("category"), constants.DEAL_DEFAULT_CATEGORY),
            "closed_deal": body.get("closed_deal"),
            "participants": body.get("participants"),
            "investors": or_default(body.get("investors"), []),
            "amount_requested": body.get("amount_requested"),
            "equity_offered": body.get("equity_offered"),
            "amount_negotiated": body.get("amount_negotiated"),
            "equity_negotiated": body.get("equity_negotiated"),
            "proposal_type": or_default(body.get("proposal_type"), constants.DEAL_DEFAULT_PROPOSAL_TYPE),
            "description": body.get("description")
        }

