from buildtracker.models.build import Build
from marshmallow import fields
from marshmallow_sqlalchemy import SQLAlchemyAutoSchema, auto_field


class BuildSchema(SQLAlchemyAutoSchema):
    class Meta:
        model = Build
        load_instance = True

    project_name = auto_field(data_key='projectName')
    build_type = auto_field(data_key='buildType')
    timestamp = fields.DateTime(format='iso')
    created_at = fields.DateTime(format='iso', data_key='createdAt')
