from flask import Flask, Response
from werkzeug.exceptions import HTTPException
from dotenv import load_dotenv
from typing import Optional, Dict, Any
import os
import yaml

from .errors import InvalidArgument
from .openapi_parts import array, reference, response, response_with_accepted, type_

load_dotenv()

__all__ = [
    "create_app",
    "InvalidArgument",
    "reference",
    "type_",
    "array",
    "response",
    "response_with_accepted",
]


def create_app(config: Optional[Dict[str, Any]] = None):
    app = Flask(__name__)
    # keep registry order in /openapi.json
    app.json.sort_keys = False

    app.config['OPENAPI_TITLE'] = os.getenv('OPENAPI_TITLE', 'Vector Search API')
    app.config['OPENAPI_VERSION'] = os.getenv('OPENAPI_VERSION', '0.1.0')

    if config:
        # allow tests or callers to override default config values
        app.config.update(config)

    from .openapi_builder import build_openapi_spec

    def current_spec():
        return build_openapi_spec(
            title=app.config['OPENAPI_TITLE'],
            version=app.config['OPENAPI_VERSION'],
        )

    @app.route('/healthz')
    def health():
        return {'status': 'ok'}

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
        app.logger.exception('Unhandled exception')
        return {
            'error': {
                'status': 500,
                'title': 'Internal Server Error',
                'detail': 'Unexpected error'
            }
        }, 500

    @app.route('/openapi.json')
    def openapi_spec():
        return current_spec()

    @app.route('/openapi.yaml')
    def openapi_spec_yaml():
        body = yaml.safe_dump(current_spec(), sort_keys=False)
        return Response(body, mimetype='application/yaml')

    @app.route('/docs')
    def docs_index():
        return (
            "<!DOCTYPE html><html><head><title>API Docs</title>"
            "<link rel=\"stylesheet\" href=\"https://cdn.jsdelivr.net/npm/redoc@next/bundles/redoc.standalone.css\" />"
            "</head><body><redoc spec-url='/openapi.json'></redoc>"
            "<script src='https://cdn.jsdelivr.net/npm/redoc@next/bundles/redoc.standalone.js'></script>"
            "</body></html>"
        )

    return app
