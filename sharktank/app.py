"""
Application factory
"""

# Python Packages
import logging

from flask import Flask
from flask_cors import CORS

# Local Imports
from .base import constants
from .config.swagger import api
from .config.urls import URLs





def create_app():
    """
    Application Factory
    """

    # App Object
    app = Flask(__name__)
    app.config["DEBUG"] = constants.APP_ENV != "production"

    # Logging
    logging.basicConfig(
        level = logging.INFO,
        format = "%(asctime)s %(levelname)s %(name)s: %(message)s"
    )

    # Enable CORS
    CORS(
        app,
        origins = constants.CORS_ALLOWED_ORIGIN,
        allow_headers = constants.CORS_ALLOWED_HEADERS.split(","),
        methods = constants.CORS_ALLOWED_METHODS.split(",")
    )

    # Initialize Swagger
    api.init_app(app)

    # Register Namespaces
    URLs.add_namespaces()

    return app



if __name__ == "__main__":
    create_app().run(host = "0.0.0.0", port = 5000)
