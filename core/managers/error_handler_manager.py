import logging

from flask import jsonify
from werkzeug.exceptions import HTTPException

logger = logging.getLogger(__name__)


class ErrorHandlerManager:
    def __init__(self, app):
        self.app = app

    def register_error_handlers(self):
        @self.app.errorhandler(404)
        def not_found(e):
            return jsonify({"message": "Resource not found"}), 404

        @self.app.errorhandler(405)
        def method_not_allowed(e):
            return jsonify({"message": "Method not allowed"}), 405

        @self.app.errorhandler(HTTPException)
        def http_error(e):
            return jsonify({"message": e.description}), e.code

        @self.app.errorhandler(Exception)
        def unhandled_exception(e):
            logger.exception(f"Unhandled exception: {e}")
            return jsonify({"message": "Internal server error"}), 500
