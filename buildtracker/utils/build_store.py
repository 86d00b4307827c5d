import logging
import uuid
from datetime import datetime, timezone

from sqlalchemy.exc import SQLAlchemyError

from buildtracker.models.build import Build
from buildtracker.utils.errors import ValidationError, InvalidIdentifierError, NotFoundError, StorageError

log = logging.getLogger(__name__)


def _validate_build_id(build_id):
    """
    Build ids are UUID strings generated on creation. Anything else can never match a
    record, so it is rejected before the database is queried.
    """
    try:
        return str(uuid.UUID(str(build_id)))
    except ValueError:
        raise InvalidIdentifierError("`{}` is not a valid build id".format(build_id))


class BuildStore:
    """
    Storage operations for build records.

    :param database: Flask-SQLAlchemy extension owning the connection pool and sessions.
    """

    def __init__(self, database):
        self.db = database

    @property
    def session(self):
        return self.db.session

    def list_builds(self):
        try:
            return self.session.query(Build).order_by(Build.created_at.desc()).all()
        except SQLAlchemyError as ex:
            self._storage_failure("Error fetching builds", ex)

    def create_build(self, project_name, build_type, description=None):
        if not project_name or not build_type:
            raise ValidationError("Project name and build type are required")
        if not isinstance(project_name, str) or not isinstance(build_type, str):
            raise ValidationError("Project name and build type must be text")
        if description is not None and not isinstance(description, str):
            raise ValidationError("Description must be text")

        now = datetime.now(timezone.utc)
        try:
            build = Build(
                id=str(uuid.uuid4()),
                project_name=project_name,
                build_type=build_type,
                description=description,
                status=Build.STATUS_IN_PROGRESS,
                timestamp=now,
                created_at=now
            )
        except ValueError as ex:
            raise ValidationError(str(ex))

        try:
            self.session.add(build)
            self.session.commit()
        except SQLAlchemyError as ex:
            self._storage_failure("Error creating build", ex)

        log.info("Created build {} for project {}".format(build.id, project_name))
        return build

    def get_build(self, build_id):
        build_id = _validate_build_id(build_id)
        try:
            build = self.session.get(Build, build_id)
        except SQLAlchemyError as ex:
            self._storage_failure("Error fetching build", ex)

        if build is None:
            raise NotFoundError("Build not found")
        return build

    def update_status(self, build_id, status):
        if status not in Build.STATUSES:
            raise ValidationError("Invalid status")

        build_id = _validate_build_id(build_id)
        try:
            build = self.session.get(Build, build_id)
            if build is None:
                raise NotFoundError("Build not found")
            build.status = status
            self.session.commit()
        except SQLAlchemyError as ex:
            self._storage_failure("Error updating build", ex)

        log.info("Build {} status set to {}".format(build_id, status))
        return build

    def delete_build(self, build_id):
        build_id = _validate_build_id(build_id)
        try:
            deleted = self.session.query(Build).filter_by(id=build_id).delete()
            self.session.commit()
        except SQLAlchemyError as ex:
            self._storage_failure("Error deleting build", ex)

        if not deleted:
            raise NotFoundError("Build not found")
        log.info("Deleted build {}".format(build_id))

    def _storage_failure(self, message, ex):
        self.session.rollback()
        log.error("{}: {}".format(message, ex))
        raise StorageError(message, original_exception=ex) from ex
