import os
import shutil
import tempfile
import unittest

from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from app.config import Settings
from app.database import get_db, init_db
from main import create_app

ADMIN_KEY = "test-admin-key"
ROOT = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))


class ApiTestCase(unittest.TestCase):
    """In-memory SQLite + temp upload/log dirs, one app per test."""

    create_tables = True

    def setUp(self):
        self.engine = create_engine(
            "sqlite://",
            connect_args={"check_same_thread": False},
            poolclass=StaticPool,
        )
        if self.create_tables:
            init_db(bind=self.engine)
        self.Session = sessionmaker(autocommit=False, autoflush=False, bind=self.engine)

        self.tmp_dir = tempfile.mkdtemp()
        self.upload_dir = os.path.join(self.tmp_dir, "uploads")
        self.settings = self.make_settings()

        def override_get_db():
            db = self.Session()
            try:
                yield db
            finally:
                db.close()

        self.app = create_app(self.settings)
        self.app.dependency_overrides[get_db] = override_get_db
        self.client = TestClient(self.app)

    def tearDown(self):
        self.app.dependency_overrides.clear()
        self.engine.dispose()
        shutil.rmtree(self.tmp_dir, ignore_errors=True)

    def make_settings(self, **overrides):
        values = dict(
            _env_file=None,
            database_url="sqlite://",
            admin_key=ADMIN_KEY,
            upload_dir=self.upload_dir,
            public_dir=os.path.join(ROOT, "public"),
            log_dir=os.path.join(self.tmp_dir, "logs"),
        )
        values.update(overrides)
        return Settings(**values)

    def upload(self, name="cake.jpg", content=b"\xff\xd8\xff fake jpeg", content_type="image/jpeg"):
        return self.client.post(
            "/api/upload-photo",
            files={"photo": (name, content, content_type)},
        )

    def uploaded_files(self):
        if not os.path.isdir(self.upload_dir):
            return []
        return sorted(os.listdir(self.upload_dir))
