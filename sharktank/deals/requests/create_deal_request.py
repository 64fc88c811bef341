"""
Create Deal Request Definition
Handles:
    - JSON body of a new deal
    - Swagger model of the body
"""

# Python Packages
from flask import request as flask_request
from flask_restx import fields





class CreateDealRequest:

    @staticmethod
    def model(namespace):
        """
        Swagger model for the request body
        """

        return namespace.model('CreateDeal', {
            'season': fields.Integer(required = True, example = 5),
            'episode': fields.Integer(required = True, example = 2),
            'company': fields.String(required = True, example = 'Acme'),
            'category': fields.String(description = "Defaults to '-'"),
            'closed_deal': fields.Boolean(required = True),
            'participants': fields.List(fields.String, required = True),
            'investors': fields.List(fields.String, description = 'Defaults to []'),
            'amount_requested': fields.Float(required = True),
            'equity_offered': fields.Float(required = True, description = 'Percentage, 0-100'),
            'amount_negotiated': fields.Float,
            'equity_negotiated': fields.Float,
            'proposal_type': fields.String(description = "Defaults to '-'"),
            'description': fields.String(required = True)
        })


    @staticmethod
    def get_data():
        """
        Extract request data
        """

        return flask_request.get_json(silent = True)
