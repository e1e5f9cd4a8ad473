"""
StudyConnect Data Layer Package

FLOW OVERVIEW
- create_app(test_config=None)
  • Build a Flask app, apply config (test dict or env-based Config).
  • Configure logging, init the db extension.
  • Register the schema / seed / repair CLI groups.
"""

from flask import Flask

from .config import Config
from .models import db
from .utils.logging_utils import configure_logging


def create_app(test_config=None):
    """Application factory"""
    app = Flask(__name__)

    # Configuration
    if test_config:
        # Use test configuration if provided
        app.config.update(test_config)
    else:
        # Use environment-based configuration
        app.config.from_object(Config())

    configure_logging(app.config.get('LOG_LEVEL', 'INFO'))

    # Initialize extensions
    db.init_app(app)

    from .cli import register_cli
    register_cli(app)

    return app
