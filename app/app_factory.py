from flask import Flask

from . import config
from .logging_config import configure_logging
from .routes.assistant import assistant_bp
from .routes.voice import voice_bp


def create_app(test_config=None):
    app = Flask(__name__)
    if test_config:
        app.config.update(test_config)
    if not app.config.get("TESTING"):
        configure_logging(config.LOG_LEVEL)
    app.register_blueprint(assistant_bp)
    app.register_blueprint(voice_bp)
    return app
