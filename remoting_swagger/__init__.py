from flask import Flask
from werkzeug.exceptions import HTTPException
from dotenv import load_dotenv
from typing import Optional, Dict, Any, Mapping
import os

from .registry import RemoteRegistry

load_dotenv()


def create_app(
    config: Optional[Dict[str, Any]] = None,
    registry: Optional[RemoteRegistry] = None,
    models: Optional[Mapping[str, Any]] = None,
):
    app = Flask(__name__)

    app.config['SWAGGER_NAME'] = os.getenv('SWAGGER_NAME', 'swagger')
    app.config['SWAGGER_API_VERSION'] = os.getenv('SWAGGER_API_VERSION')
    app.config['SWAGGER_BASE_PATH'] = os.getenv('SWAGGER_BASE_PATH', '')
    app.config['SWAGGER_REGISTRY_FILE'] = os.getenv('SWAGGER_REGISTRY_FILE')

    if config:
        # allow tests or callers to override default config values
        app.config.update(config)

    if registry is None:
        registry_file = app.config['SWAGGER_REGISTRY_FILE']
        registry = RemoteRegistry.from_file(registry_file) if registry_file else RemoteRegistry()

    # Documents are built once here; a broken registry fails start-up
    from .config.swagger import options_from_config
    from .swagger import build_swagger_docs
    from .routes.swagger import make_swagger_bp

    options = options_from_config(app.config)
    docs = build_swagger_docs(registry, options, models)
    app.extensions['swagger_docs'] = docs
    app.register_blueprint(make_swagger_bp(docs), url_prefix=f'/{options.name}')
    app.logger.info('Swagger documents mounted at /%s (%d classes)', options.name, len(docs.apis))

    # Unified error handler producing standardized JSON shape
    @app.errorhandler(Exception)
    def handle_errors(e):  # type: ignore
        if isinstance(e, HTTPException):
            payload = {
                'error': {
                    'status': e.code,
                    'title': e.name,
                    'detail': e.description,
                }
            }
            return payload, e.code
        # Unhandled exception
        app.logger.exception('Unhandled exception')
        return {
            'error': {
                'status': 500,
                'title': 'Internal Server Error',
                'detail': 'Unexpected error'
            }
        }, 500

    return app
