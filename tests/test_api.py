"""HTTP-level tests: status codes, JSON shapes and the register -> library -> delete flow."""

import tempfile
import unittest
from pathlib import Path

from fastapi.testclient import TestClient

from gamestore.core.database import get_db
from gamestore.main import create_app
from gamestore.models import Base
from gamestore.services.credentials import register_user
from support import bearer, make_client, make_settings


class ApiTestCase(unittest.TestCase):
    client_overrides: dict = {}

    def setUp(self) -> None:
        self.client = make_client(**self.client_overrides)

    def tearDown(self) -> None:
        self.client.close()

    def register(self, username: str = "ann", email: str = "a@x.com", password: str = "p12345") -> str:
        resp = self.client.post(
            "/api/auth/register",
            json={"username": username, "email": email, "password": password},
        )
        self.assertEqual(resp.status_code, 200, resp.text)
        return resp.json()["token"]


class TestAuthEndpoints(ApiTestCase):
    def test_register_returns_token_and_user(self) -> None:
        resp = self.client.post(
            "/api/auth/register",
            json={"username": "ann", "email": "A@X.com", "password": "p12345"},
        )
        self.assertEqual(resp.status_code, 200)
        body = resp.json()
        self.assertTrue(body["token"])
        self.assertEqual(
            set(body["user"]), {"id", "username", "email", "isAdmin"}
        )
        self.assertEqual(body["user"]["email"], "a@x.com")
        self.assertFalse(body["user"]["isAdmin"])

    def test_register_missing_fields(self) -> None:
        resp = self.client.post("/api/auth/register", json={"username": "ann"})
        self.assertEqual(resp.status_code, 400)
        self.assertEqual(resp.json(), {"message": "Missing fields"})

    def test_register_duplicate(self) -> None:
        self.register()
        resp = self.client.post(
            "/api/auth/register",
            json={"username": "other", "email": "a@x.com", "password": "pw"},
        )
        self.assertEqual(resp.status_code, 400)
        self.assertEqual(resp.json()["message"], "Email or username already in use")

    def test_login(self) -> None:
        self.register()
        resp = self.client.post(
            "/api/auth/login", json={"emailOrUsername": "A@x.COM", "password": "p12345"}
        )
        self.assertEqual(resp.status_code, 200)
        self.assertEqual(resp.json()["user"]["username"], "ann")

        resp = self.client.post(
            "/api/auth/login", json={"emailOrUsername": "ann", "password": "nope"}
        )
        self.assertEqual(resp.status_code, 400)
        self.assertEqual(resp.json(), {"message": "Invalid credentials"})


class TestProtectedRoutes(ApiTestCase):
    def test_missing_token(self) -> None:
        resp = self.client.get("/api/library")
        self.assertEqual(resp.status_code, 401)
        self.assertEqual(resp.json(), {"message": "No token provided"})

    def test_malformed_token(self) -> None:
        resp = self.client.post("/api/games", json={"title": "X"}, headers={"Authorization": "Bearer"})
        self.assertEqual(resp.status_code, 401)
        self.assertEqual(resp.json(), {"message": "Malformed token"})

    def test_invalid_token(self) -> None:
        resp = self.client.get("/api/library", headers=bearer("abc.def.ghi"))
        self.assertEqual(resp.status_code, 401)
        self.assertEqual(resp.json(), {"message": "Invalid or expired token"})


class TestGamesEndpoints(ApiTestCase):
    def test_crud(self) -> None:
        token = self.register()
        resp = self.client.post(
            "/api/games",
            json={"title": "Chess", "releaseDate": "1990-01-02", "coverUrl": "c.png"},
            headers=bearer(token),
        )
        self.assertEqual(resp.status_code, 200, resp.text)
        game = resp.json()
        self.assertEqual(game["price"], 0)
        self.assertEqual(game["releaseDate"], "1990-01-02")
        self.assertEqual(game["coverUrl"], "c.png")
        self.assertIsNotNone(game["createdBy"])

        resp = self.client.get("/api/games", params={"q": "che"})
        self.assertEqual([g["id"] for g in resp.json()], [game["id"]])

        resp = self.client.put(
            f"/api/games/{game['id']}", json={"genre": "board"}, headers=bearer(token)
        )
        self.assertEqual(resp.json()["genre"], "board")
        self.assertEqual(resp.json()["title"], "Chess")

        resp = self.client.get(f"/api/games/{game['id']}")
        self.assertEqual(resp.json()["genre"], "board")

    def test_title_required(self) -> None:
        resp = self.client.post("/api/games", json={"price": 3}, headers=bearer(self.register()))
        self.assertEqual(resp.status_code, 400)
        self.assertEqual(resp.json(), {"message": "Title required"})

    def test_not_found(self) -> None:
        token = self.register()
        self.assertEqual(self.client.get("/api/games/999").status_code, 404)
        self.assertEqual(
            self.client.put("/api/games/999", json={"title": "X"}, headers=bearer(token)).json(),
            {"message": "Not found"},
        )
        self.assertEqual(
            self.client.delete("/api/games/999", headers=bearer(token)).status_code, 404
        )

    def test_bad_id_and_unknown_route(self) -> None:
        self.assertEqual(self.client.get("/api/games/abc").status_code, 400)
        resp = self.client.get("/api/nothing-here")
        self.assertEqual(resp.status_code, 404)
        self.assertEqual(resp.json(), {"message": "Not found"})


class TestLibraryFlow(ApiTestCase):
    def test_register_create_add_delete(self) -> None:
        token = self.register("ann", "a@x.com", "p12345")
        game = self.client.post("/api/games", json={"title": "Chess"}, headers=bearer(token)).json()
        self.assertEqual(game["price"], 0)

        resp = self.client.post("/api/library/add", json={"gameId": game["id"]}, headers=bearer(token))
        self.assertEqual(resp.status_code, 200)
        self.assertEqual(resp.json(), {"message": "Added", "library": [game["id"]]})

        resp = self.client.post("/api/library/add", json={"gameId": game["id"]}, headers=bearer(token))
        self.assertEqual(resp.status_code, 400)
        self.assertEqual(resp.json(), {"message": "Already in library"})

        library = self.client.get("/api/library", headers=bearer(token)).json()
        self.assertEqual([g["title"] for g in library], ["Chess"])

        resp = self.client.delete(f"/api/games/{game['id']}", headers=bearer(token))
        self.assertEqual(resp.json(), {"message": "Deleted"})
        self.assertEqual(self.client.get("/api/library", headers=bearer(token)).json(), [])

    def test_add_unknown_game_and_missing_id(self) -> None:
        token = self.register()
        resp = self.client.post("/api/library/add", json={"gameId": 404}, headers=bearer(token))
        self.assertEqual(resp.status_code, 404)
        self.assertEqual(resp.json(), {"message": "Game not found"})
        resp = self.client.post("/api/library/add", json={}, headers=bearer(token))
        self.assertEqual(resp.status_code, 400)
        self.assertEqual(resp.json(), {"message": "gameId required"})

    def test_remove_never_added_is_noop(self) -> None:
        token = self.register()
        game = self.client.post("/api/games", json={"title": "Go"}, headers=bearer(token)).json()
        resp = self.client.post(
            "/api/library/remove", json={"gameId": str(game["id"])}, headers=bearer(token)
        )
        self.assertEqual(resp.status_code, 200)
        self.assertEqual(resp.json(), {"message": "Removed", "library": []})


class TestAdminOnlyCatalog(ApiTestCase):
    client_overrides = {"ADMIN_ONLY_CATALOG_WRITES": True}

    def test_regular_user_forbidden_admin_allowed(self) -> None:
        token = self.register()
        resp = self.client.post("/api/games", json={"title": "Chess"}, headers=bearer(token))
        self.assertEqual(resp.status_code, 403)
        self.assertEqual(resp.json(), {"message": "Admin access required"})

        app = self.client.app
        with app.state.session_factory() as db:
            register_user(db, app.state.settings, "root", "root@x.com", "pw", is_admin=True)
        resp = self.client.post(
            "/api/auth/login", json={"emailOrUsername": "root", "password": "pw"}
        )
        admin_token = resp.json()["token"]
        resp = self.client.post("/api/games", json={"title": "Chess"}, headers=bearer(admin_token))
        self.assertEqual(resp.status_code, 200)

        # Library changes stay open to everyone.
        resp = self.client.post(
            "/api/library/add", json={"gameId": resp.json()["id"]}, headers=bearer(token)
        )
        self.assertEqual(resp.status_code, 200)


class TestOutOfRangeIds(ApiTestCase):
    """Ids larger than the integer columns can hold name no game."""

    HUGE = 99999999999999999999

    def test_game_routes_return_not_found(self) -> None:
        token = self.register()
        resp = self.client.get(f"/api/games/{self.HUGE}")
        self.assertEqual(resp.status_code, 404)
        self.assertEqual(resp.json(), {"message": "Not found"})
        resp = self.client.put(f"/api/games/{self.HUGE}", json={"title": "X"}, headers=bearer(token))
        self.assertEqual(resp.status_code, 404)
        resp = self.client.delete(f"/api/games/{self.HUGE}", headers=bearer(token))
        self.assertEqual(resp.status_code, 404)

    def test_library_add_is_not_found_and_remove_is_noop(self) -> None:
        token = self.register()
        game = self.client.post("/api/games", json={"title": "Go"}, headers=bearer(token)).json()
        self.client.post("/api/library/add", json={"gameId": game["id"]}, headers=bearer(token))

        for game_id in (str(self.HUGE), self.HUGE):
            resp = self.client.post("/api/library/add", json={"gameId": game_id}, headers=bearer(token))
            self.assertEqual(resp.status_code, 404)
            self.assertEqual(resp.json(), {"message": "Game not found"})

            resp = self.client.post(
                "/api/library/remove", json={"gameId": game_id}, headers=bearer(token)
            )
            self.assertEqual(resp.status_code, 200)
            self.assertEqual(resp.json(), {"message": "Removed", "library": [game["id"]]})


class TestUnhandledError(unittest.TestCase):
    def test_renders_server_error_message(self) -> None:
        app = create_app(make_settings())

        def broken_db():
            raise RuntimeError("database went away")

        app.dependency_overrides[get_db] = broken_db
        with TestClient(app, raise_server_exceptions=False) as client:
            resp = client.get("/api/games")
        self.assertEqual(resp.status_code, 500)
        self.assertEqual(resp.json(), {"message": "Server error"})


class TestStaticFrontend(unittest.TestCase):
    def setUp(self) -> None:
        self.tmpdir = tempfile.TemporaryDirectory()
        Path(self.tmpdir.name, "index.html").write_text("<h1>Gamestore</h1>", encoding="utf-8")
        app = create_app(make_settings(FRONTEND_DIR=self.tmpdir.name))
        Base.metadata.create_all(app.state.engine)
        self.client = TestClient(app)

    def tearDown(self) -> None:
        self.client.close()
        self.tmpdir.cleanup()

    def test_index_served_at_root(self) -> None:
        resp = self.client.get("/")
        self.assertEqual(resp.status_code, 200)
        self.assertIn("<h1>Gamestore</h1>", resp.text)

    def test_api_routes_take_precedence(self) -> None:
        resp = self.client.get("/api/games")
        self.assertEqual(resp.status_code, 200)
        self.assertEqual(resp.json(), [])

    def test_unknown_api_path_is_json_404(self) -> None:
        resp = self.client.get("/api/x")
        self.assertEqual(resp.status_code, 404)
        self.assertEqual(resp.json(), {"message": "Not found"})


class TestHealth(ApiTestCase):
    def test_health(self) -> None:
        resp = self.client.get("/api/health")
        self.assertEqual(resp.status_code, 200)
        self.assertEqual(
            resp.json(), {"status": "ok", "environment": "dev", "database": "connected"}
        )


if __name__ == "__main__":
    unittest.main()
