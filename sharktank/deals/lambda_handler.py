"""
File: Deal Lambda Entry Points

Serverless counterparts of the Flask routes, behind API Gateway
proxy integration:
    - get_deals   (GET  /deals)
    - create_deal (POST /deals)
"""

# Python Packages
import json
import logging

# Controller
from ..deals.controller import DealController

# Validations
from ..deals.validations.create_deal_validation import CreateDealValidation

# Constants
from ..base import constants

# Errors & Exceptions
from ..util.exceptions import AppException, InternalServerException

logger = logging.getLogger(__name__)





def _response(status_code: int, payload) -> dict:
    """ API Gateway proxy response with CORS headers... """

    return {
        "statusCode": status_code,
        "headers": {
            "Access-Control-Allow-Headers": constants.CORS_ALLOWED_HEADERS,
            "Access-Control-Allow-Origin": constants.CORS_ALLOWED_ORIGIN,
            "Access-Control-Allow-Methods": constants.CORS_ALLOWED_METHODS
        },
        "body": json.dumps(payload)
    }



def get_deals(event, context = None, controller: DealController = None):
    """
    Lambda: list every deal
    """

    logger.info("[getDeals] Received event: %s", json.dumps(event, default = str))

    try:
        items = (controller or DealController()).list_deals()
        return _response(200, items)

    except AppException as error:
        return _response(error.status_code, error.to_dict())

    except Exception as error:
        logger.exception("[getDeals] Error")
        error = InternalServerException(details = str(error))
        return _response(error.status_code, error.to_dict())



def create_deal(event, context = None, controller: DealController = None):
    """
    Lambda: create a deal from the JSON event body
    """

    logger.info("[createDeal] Received event: %s", json.dumps(event, default = str))

    try:
        raw_body = (event or {}).get("body")
        body = json.loads(raw_body) if raw_body else None

        CreateDealValidation().validate(body)

        item = (controller or DealController()).create_deal(body)
        return _response(201, item)

    except AppException as error:
        return _response(error.status_code, error.to_dict())

    except Exception as error:
        logger.exception("[createDeal] Error")
        error = InternalServerException(details = str(error))
        return _response(error.status_code, error.to_dict())
