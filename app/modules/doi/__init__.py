from flask_restful import Api

from app.modules.doi.api import init_blueprint_api
from core.blueprints.base_blueprint import BaseBlueprint


doi_bp = BaseBlueprint("doi", __name__)


api = Api(doi_bp)
init_blueprint_api(api)
