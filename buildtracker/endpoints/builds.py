import json
import logging

from flask_restx import Namespace, Resource
from flask_api import status

from buildtracker.schemas.build_schema import BuildSchema
from buildtracker.utils.http_util import custom_response, request_payload

log = logging.getLogger(__name__)

ns = Namespace("builds", description="Build record operations")


def _dump(build):
    build_schema = BuildSchema()
    return json.loads(build_schema.dumps(build))


def _dump_many(builds):
    build_schema = BuildSchema(many=True)
    return json.loads(build_schema.dumps(builds))


class BuildResource(Resource):
    """Base resource receiving the build store the app was created with."""

    def __init__(self, api=None, *args, store=None, **kwargs):
        super().__init__(api, *args, **kwargs)
        self.store = store


class BuildList(BuildResource):

    def get(self):
        """
        List all builds, most recently created first
        """
        builds = self.store.list_builds()
        return _dump_many(builds), status.HTTP_200_OK

    def post(self):
        """
        Record a new build. The status always starts as "In Progress".
        Example request
        {
            "projectName": "zanika-app",
            "buildType": "production",
            "description": "Release candidate"
        }
        """
        req_data = request_payload()
        build = self.store.create_build(
            req_data.get("projectName"),
            req_data.get("buildType"),
            req_data.get("description")
        )
        return _dump(build), status.HTTP_201_CREATED


class BuildItem(BuildResource):

    def get(self, build_id):
        """
        Fetch a single build
        """
        build = self.store.get_build(build_id)
        return _dump(build), status.HTTP_200_OK

    def put(self, build_id):
        """
        Update the status of a build. Allowed values: "In Progress", "Complete", "Failed"
        Example request
        {
            "status": "Complete"
        }
        """
        req_data = request_payload()
        build = self.store.update_status(build_id, req_data.get("status"))
        return _dump(build), status.HTTP_200_OK

    def delete(self, build_id):
        """
        Delete a build
        """
        self.store.delete_build(build_id)
        return custom_response("Build deleted successfully")


def register_resources(store):
    """Binds the build resources to the given store and returns the namespace."""
    resource_kwargs = {"store": store}
    ns.add_resource(BuildList, "", resource_class_kwargs=resource_kwargs)
    ns.add_resource(BuildItem, "/<string:build_id>", resource_class_kwargs=resource_kwargs)
    return ns
