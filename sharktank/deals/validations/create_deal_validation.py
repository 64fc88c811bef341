"""
Create Deal Validation

Only the shape of the body is checked. Field values are stored as
given; absent fields are stored as absent.
"""

# App Messages
from ...util import messages

# Exceptions
from ...util.exceptions import ValidationException





class CreateDealValidation:

    def validate(self, body):
        """
        Validate request body
        """

        if not isinstance(body, dict):
            raise ValidationException(
                message = messages.ERROR['INVALID_REQUEST']
            )

        return True
