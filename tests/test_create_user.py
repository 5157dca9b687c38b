"""Tests for the create_user CLI (the only way to grant the admin flag)."""

import os
import tempfile
import unittest
from unittest.mock import patch

from gamestore.core.database import create_db_engine, create_session_factory
from gamestore.models import Base, User
from gamestore.scripts.create_user import main
from support import make_settings


class TestCreateUserCli(unittest.TestCase):
    def setUp(self) -> None:
        self.tmpdir = tempfile.TemporaryDirectory()
        url = "sqlite:///" + os.path.join(self.tmpdir.name, "users.db")
        self.engine = create_db_engine(url)
        Base.metadata.create_all(self.engine)
        self.settings = make_settings(DATABASE_URL=url)

    def tearDown(self) -> None:
        self.engine.dispose()
        self.tmpdir.cleanup()

    def _run(self, *argv: str) -> int:
        with patch("gamestore.scripts.create_user.get_settings", return_value=self.settings):
            return main(list(argv))

    def test_creates_admin(self) -> None:
        self.assertEqual(self._run("root", "Root@X.com", "secret", "--admin"), 0)
        with create_session_factory(self.engine)() as db:
            user = db.query(User).filter(User.username == "root").one()
        self.assertTrue(user.is_admin)
        self.assertEqual(user.email, "root@x.com")

    def test_duplicate_fails(self) -> None:
        self.assertEqual(self._run("root", "root@x.com", "secret"), 0)
        self.assertEqual(self._run("root", "other@x.com", "secret"), 1)


if __name__ == "__main__":
    unittest.main()
