import logging

from flask import request
from flask_restful import Resource

from app.modules.doi.services import DoiSuggestionService

logger = logging.getLogger(__name__)

# Resource ids are positive signed 64-bit integers
MAX_RESOURCE_ID = 2**63 - 1


def is_resource_id(value) -> bool:
    # bool is an int subclass
    if isinstance(value, bool) or not isinstance(value, int):
        return False
    return 1 <= value <= MAX_RESOURCE_ID


class DoiValidationResource(Resource):
    def post(self):
        payload = request.get_json(silent=True)
        if not isinstance(payload, dict):
            payload = {}
        doi = payload.get("doi")
        exclude_resource_id = payload.get("exclude_resource_id")

        if not isinstance(doi, str):
            return {"message": "The 'doi' field is required and must be a string."}, 400

        if exclude_resource_id is not None and not is_resource_id(exclude_resource_id):
            return {"message": "The 'exclude_resource_id' field must be a positive integer."}, 400

        service = DoiSuggestionService()
        result = service.validate(service.normalize_doi(doi), exclude_resource_id)

        if not result.is_valid_format:
            logger.info(f"Rejected malformed DOI {doi!r}")
            return result.to_dict(), 422

        return result.to_dict(), 200


def init_blueprint_api(api):
    api.add_resource(DoiValidationResource, "/api/v1/doi/validate")
