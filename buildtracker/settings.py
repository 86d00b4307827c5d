import os
from dotenv import load_dotenv

load_dotenv()


def str2bool(v):
  return v.lower() in ("y", "yes", "true", "t", "1")


# Flask settings
FLASK_SERVER_NAME = os.getenv('FLASK_SERVER_NAME', 'localhost:5000')
FLASK_DEBUG = str2bool(os.getenv('FLASK_DEBUG', 'False'))  # Do not use debug mode in production
PORT = int(os.getenv('PORT', '5000'))

# Flask-RESTX settings
RESTX_SWAGGER_UI_DOC_EXPANSION = os.getenv('RESTX_SWAGGER_UI_DOC_EXPANSION', 'list')
RESTX_VALIDATE = str2bool(os.getenv('RESTX_VALIDATE', 'True'))
RESTX_MASK_SWAGGER = str2bool(os.getenv('RESTX_MASK_SWAGGER', 'False'))
RESTX_ERROR_404_HELP = str2bool(os.getenv('RESTX_ERROR_404_HELP', 'False'))

# Database
DATABASE_URL = os.getenv('DATABASE_URL', 'sqlite:///builds.db')
SQLALCHEMY_POOL_PRE_PING = str2bool(os.getenv('SQLALCHEMY_POOL_PRE_PING', 'True'))

# Logging
LOGGING_CONF = os.getenv('LOGGING_CONF', os.path.join(os.path.dirname(__file__), 'logging.conf'))
