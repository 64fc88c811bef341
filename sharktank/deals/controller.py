"""
Deal Controller

Handles:
    - Orchestration between handlers (Flask / Lambda) and service layer
"""

# Services
from .services.list_deal_service import ListDealService
from .services.create_deal_service import CreateDealService

# Vendors
from ..vendors.aws.dynamodb_table import DynamoDBTable





class DealController:

    def __init__(self, table: DynamoDBTable = None):
        """ Initialize controller with service instances... """

        table = table or DynamoDBTable()

        self.list_service = ListDealService(table)
        self.create_service = CreateDealService(table)


    def list_deals(self) -> list:
        """
        List every deal

        Returns:
            list: raw items, keyed by composite 'id'
        """

        return self.list_service.list_deals()



    def create_deal(self, body: dict) -> dict:
        """
        Create deal

        Args:
            body (dict): request body, see CreateDealService.create_deal

        Returns:
            dict: stored item
        """

        return self.create_service.create_deal(body)
