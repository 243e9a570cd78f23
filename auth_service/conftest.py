import os
import tempfile

import pytest

# Point the DB at a temp file so tests don't touch a real auth.db.
# Must run before anything imports auth_service.config.
_test_db = tempfile.NamedTemporaryFile(suffix=".db", delete=False)
_test_db.close()

os.environ["AUTH_DB_PATH"] = _test_db.name
os.environ.setdefault("SECRET_KEY", "test-secret-key-for-unit-tests-1234567890")


@pytest.fixture(scope="session", autouse=True)
def remove_test_db():
    """Drop pooled connections and delete the temp DB file after the run."""
    yield
    from auth_service import database

    database.engine.dispose()
    if os.path.exists(_test_db.name):
        os.remove(_test_db.name)
