"""
Application Custom Exceptions

Purpose:
    - Standardize error handling across the deals API
    - Keep storage errors out of API responses except as details
    - Name the catalog failures the client side can recover from
"""

# App Messages
from . import messages





class AppException(Exception):
    """
    Base application exception.
    """

    def __init__(
        self,
        error_code: str,
        message: str,
        status_code: int = 400,
        details: str = None
    ):
        """
        Args:
            error_code (str): Unique business error identifier
            message (str): User-friendly error message
            status_code (int): HTTP status code (default: 400)
            details (str): Optional internal/debug details
        """

        self.error_code = error_code
        self.message = message
        self.status_code = status_code
        self.details = details

        super().__init__(message)



    def to_dict(self) -> dict:
        """
        Convert exception to standardized API response format.
        """

        response = {
            "status": "error",
            "error_code": self.error_code,
            "message": self.message
        }

        if self.details:
            response["details"] = self.details

        return response





# --------------------------------------------
# Specific Exception Types
# --------------------------------------------

class ValidationException(AppException):
    """
    Raised when the request cannot be used at all.
    """

    def __init__(self, message: str, details: str = None):
        super().__init__(
            error_code = "VALIDATION_ERROR",
            message = message,
            status_code = 400,
            details = details
        )





class ServiceException(AppException):
    """
    Raised when a storage operation fails.
    """

    def __init__(
        self,
        error_code: str,
        message: str,
        details: str = None,
        status_code: int = 500
    ):
        super().__init__(
            error_code = error_code,
            message = message,
            status_code = status_code,
            details = details
        )





class InternalServerException(AppException):
    """
    Raised for unexpected system errors.
    """

    def __init__(self, details: str = None):
        super().__init__(
            error_code = "INTERNAL_SERVER_ERROR",
            message = "Something went wrong. Please try again later.",
            status_code = 500,
            details  = details
        )





# --------------------------------------------
# Catalog Errors
# --------------------------------------------

class MalformedDealIdError(ValueError):
    """ Deal id is not 'season#episode#company' with integer season/episode... """

    def __init__(self, deal_id):
        self.deal_id = deal_id
        super().__init__(messages.ERROR["MALFORMED_DEAL_ID"].format(deal_id = deal_id))



class PageOutOfRangeError(ValueError):
    """ Requested page does not exist for the current result set... """

    def __init__(self, page, total_pages: int):
        self.page = page
        self.total_pages = total_pages
        super().__init__(
            messages.ERROR["PAGE_OUT_OF_RANGE"].format(page = page, total_pages = total_pages)
        )



class InvalidSortFieldError(ValueError):
    """ Sort field is not a deal field... """

    def __init__(self, field: str):
        self.field = field
        super().__init__(messages.ERROR["INVALID_SORT_FIELD"].format(field = field))
