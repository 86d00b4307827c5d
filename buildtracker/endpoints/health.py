from datetime import datetime, timezone

from flask_restx import Namespace, Resource
from flask_api import status

ns = Namespace("health", description="Service health")


@ns.route("")
class Health(Resource):

    def get(self):
        return {"status": "Server is running!", "timestamp": datetime.now(timezone.utc).isoformat()}, status.HTTP_200_OK
