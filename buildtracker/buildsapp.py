#!/usr/bin/env python

import logging.config

from flask import Flask, Blueprint, request
from buildtracker import settings
from buildtracker.endpoints import builds
from buildtracker.endpoints.health import ns as health_namespace
from buildtracker.restplus import api
from buildtracker.build_database import db
from buildtracker.models import initialize_sql
from buildtracker.utils.build_store import BuildStore
from flask_cors import CORS

app = Flask(__name__)
CORS(app)
logging.config.fileConfig(settings.LOGGING_CONF, disable_existing_loggers=False)
log = logging.getLogger(__name__)

app.config['SQLALCHEMY_DATABASE_URI'] = settings.DATABASE_URL
app.config['SQLALCHEMY_TRACK_MODIFICATIONS'] = False
app.config['SQLALCHEMY_ENGINE_OPTIONS'] = {'pool_pre_ping': settings.SQLALCHEMY_POOL_PRE_PING}
app.config['SWAGGER_UI_DOC_EXPANSION'] = settings.RESTX_SWAGGER_UI_DOC_EXPANSION
app.config['RESTX_VALIDATE'] = settings.RESTX_VALIDATE
app.config['RESTX_MASK_SWAGGER'] = settings.RESTX_MASK_SWAGGER
app.config['RESTX_ERROR_404_HELP'] = settings.RESTX_ERROR_404_HELP

db.init_app(app)
with app.app_context():
    # Create any new tables
    initialize_sql(db.engine)

# The store shares the app-wide connection pool and is handed to every build resource
build_store = BuildStore(db)

blueprint = Blueprint('api', __name__, url_prefix='/api')
api.init_app(blueprint)
api.add_namespace(builds.register_resources(build_store))
api.add_namespace(health_namespace)
app.register_blueprint(blueprint)


@app.after_request
def add_security_headers(response):
    response.headers['X-Content-Type-Options'] = 'nosniff'
    response.headers['X-Frame-Options'] = 'SAMEORIGIN'
    response.headers['X-XSS-Protection'] = '1; mode=block'
    if request.is_secure or request.headers.get('X-Forwarded-Proto', 'http') == 'https':
        response.headers['Strict-Transport-Security'] = 'max-age=31536000; includeSubDomains'
    return response


@app.route('/')
def index():
    return '<a href="/api/">Build Tracker API</a>'


def main():
    base_url = 'http://{}/api'.format(settings.FLASK_SERVER_NAME)
    log.info('>>>>> Starting development server at {}/ <<<<<'.format(base_url))
    log.info('Available endpoints:')
    log.info('  GET    {}/builds - Get all builds'.format(base_url))
    log.info('  POST   {}/builds - Create a new build'.format(base_url))
    log.info('  GET    {}/builds/<id> - Get build by ID'.format(base_url))
    log.info('  PUT    {}/builds/<id> - Update build status'.format(base_url))
    log.info('  DELETE {}/builds/<id> - Delete a build'.format(base_url))
    log.info('  GET    {}/health - Health check'.format(base_url))
    app.run(host='0.0.0.0', port=settings.PORT, debug=settings.FLASK_DEBUG)


if __name__ == "__main__":
    main()
