from datetime import timezone

from sqlalchemy.orm import validates
from sqlalchemy.types import TypeDecorator

from buildtracker.models import Base
from buildtracker.build_database import db


class UTCDateTime(TypeDecorator):
    """Stores datetimes in UTC and always loads them back timezone aware."""

    impl = db.DateTime(timezone=True)
    cache_ok = True

    def process_bind_param(self, value, dialect):
        if value is not None and value.tzinfo is not None:
            value = value.astimezone(timezone.utc)
        return value

    def process_result_value(self, value, dialect):
        # SQLite drops the offset; values are always written in UTC
        if value is not None and value.tzinfo is None:
            value = value.replace(tzinfo=timezone.utc)
        return value


class Build(Base):
    """
    Metadata and status of a tracked build.
    Only status changes after creation; the service records builds, it does not run them.
    """

    __tablename__ = 'build'

    STATUS_IN_PROGRESS = 'In Progress'
    STATUS_COMPLETE = 'Complete'
    STATUS_FAILED = 'Failed'
    STATUSES = (STATUS_IN_PROGRESS, STATUS_COMPLETE, STATUS_FAILED)

    BUILD_TYPES = ('development', 'staging', 'production')

    id = db.Column(db.String(36), primary_key=True)
    project_name = db.Column(db.String(), nullable=False)
    build_type = db.Column(db.String(), nullable=False)
    description = db.Column(db.String(), nullable=True)
    status = db.Column(db.String(), nullable=False, default=STATUS_IN_PROGRESS)
    timestamp = db.Column(UTCDateTime, nullable=False)
    created_at = db.Column(UTCDateTime, nullable=False, index=True)

    @validates('project_name')
    def validate_project_name(self, key, value):
        if not value:
            raise ValueError("projectName must not be empty")
        return value

    @validates('build_type')
    def validate_build_type(self, key, value):
        if value not in self.BUILD_TYPES:
            raise ValueError("`{}` is not a valid buildType. Allowed: {}".format(value, ", ".join(self.BUILD_TYPES)))
        return value

    @validates('status')
    def validate_status(self, key, value):
        if value not in self.STATUSES:
            raise ValueError("`{}` is not a valid status. Allowed: {}".format(value, ", ".join(self.STATUSES)))
        return value

    def __repr__(self):
        return "<Build(id={self.id!r}, status={self.status!r})>".format(self=self)
