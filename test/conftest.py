import pytest
import os

# Must be set before the app module reads its settings
os.environ['DATABASE_URL'] = os.getenv('TEST_DATABASE_URL', 'sqlite:///:memory:')

from buildtracker.buildsapp import app, build_store
from buildtracker.build_database import db
from buildtracker.models import Base, initialize_sql


@pytest.fixture(scope="session")
def test_app():
    """Create application for testing."""
    app.config['TESTING'] = True
    return app


@pytest.fixture
def store(test_app):
    """Build store bound to a fresh schema inside an app context."""
    with test_app.app_context():
        initialize_sql(db.engine)
        yield build_store
        db.session.remove()
        Base.metadata.drop_all(db.engine)
