import os
import tempfile

# Point the app at a throwaway database before any smarteam import reads settings.
_tmp_dir = tempfile.mkdtemp(prefix="smarteam-tests-")
os.environ["DATABASE_URL"] = f"sqlite:///{os.path.join(_tmp_dir, 'test.db')}"
os.environ["JWT_SECRET"] = "test-secret-with-enough-length-for-hs256"
os.environ["ADMIN_EMAIL"] = "admin@example.com"
os.environ["ADMIN_PASSWORD"] = "adminpass"

import pytest

from smarteam.db.session import Base, engine
import smarteam.models.user  # noqa: F401


@pytest.fixture(autouse=True)
def _reset_db():
    Base.metadata.drop_all(bind=engine)
    Base.metadata.create_all(bind=engine)
    yield
    Base.metadata.drop_all(bind=engine)
