"""
File: Deal Routes

Handles:
    - List Deals
    - Create Deal
"""

# Python Packages
import logging

# Flask Packages
from flask_restx import Namespace, Resource

# Request
from ..deals.requests.create_deal_request import CreateDealRequest

# Validations
from ..deals.validations.create_deal_validation import CreateDealValidation

# Controller
from ..deals.controller import DealController

# Errors & Exceptions
from ..util.exceptions import AppException, InternalServerException

# Namespaces
deal_namespace = Namespace('deals', description = 'Deal Catalog APIs')

create_deal_model = CreateDealRequest.model(deal_namespace)

logger = logging.getLogger(__name__)





@deal_namespace.route('')
class Deals(Resource):

    def get(self):
        """
        List every deal (full table scan)
        """

        logger.info("[getDeals] Received request")

        try:
            # Controller
            return DealController().list_deals(), 200

        except AppException as error:
            return error.to_dict(), error.status_code

        except Exception as error:
            logger.exception("[getDeals] Error")
            error = InternalServerException(details = str(error))
            return error.to_dict(), error.status_code



    @deal_namespace.expect(create_deal_model)
    def post(self):
        """
        Create a deal keyed by 'season#episode#company' (overwrites)
        """

        try:
            # Args
            body = CreateDealRequest.get_data()
            logger.info("[createDeal] Parsed body: %s", body)

            # Validations
            CreateDealValidation().validate(body)

            # Controller
            return DealController().create_deal(body), 201

        except AppException as error:
            return error.to_dict(), error.status_code

        except Exception as error:
            logger.exception("[createDeal] Error")
            error = InternalServerException(details = str(error))
            return error.to_dict(), error.status_code
