"""HTTP-level tests for register/login/health routes via FastAPI TestClient."""

import unittest
from unittest.mock import patch

from fastapi.testclient import TestClient

from app.core.config import Settings
from app.main import create_app


def _body(**overrides: object) -> dict[str, object]:
    body: dict[str, object] = {
        "username": "alice",
        "email": "alice@mailbox.org",
        "role": "user",
        "password": "Valid1!pass",
    }
    body.update(overrides)
    return body


class ApiTestCase(unittest.TestCase):
    def setUp(self) -> None:
        settings = Settings(
            BCRYPT_ROUNDS=4,
            APP_ENV="dev",
            CORS_ALLOWED_ORIGINS=["http://localhost:4200"],
        )
        self.client = TestClient(create_app(settings))


class TestRoot(ApiTestCase):
    def test_root_reports_running(self) -> None:
        response = self.client.get("/")
        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.json(), {"success": "Backend is running"})

    def test_health_counts_accounts(self) -> None:
        self.assertEqual(self.client.get("/health").json()["accounts"], 0)
        self.client.post("/register", json=_body())
        response = self.client.get("/health")
        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.json(), {"status": "ok", "environment": "dev", "accounts": 1})


class TestRegisterEndpoint(ApiTestCase):
    def test_register_returns_201_without_secrets(self) -> None:
        response = self.client.post("/register", json=_body())
        self.assertEqual(response.status_code, 201)
        self.assertEqual(response.json(), {"message": "User registered successfully"})

    def test_policy_violation_returns_400(self) -> None:
        response = self.client.post("/register", json=_body(password="NoSymbol123"))
        self.assertEqual(response.status_code, 400)
        self.assertIn("password", response.json()["error"])

    def test_missing_field_returns_400(self) -> None:
        body = _body()
        del body["role"]
        response = self.client.post("/register", json=body)
        self.assertEqual(response.status_code, 400)
        self.assertEqual(response.json(), {"error": "role is required"})

    def test_wrong_type_returns_400(self) -> None:
        response = self.client.post("/register", json=_body(username=["alice"]))
        self.assertEqual(response.status_code, 400)
        self.assertEqual(response.json(), {"error": "username must be a string"})

    def test_username_rule_reported_before_email_type_error(self) -> None:
        response = self.client.post("/register", json=_body(username="ab", email=123))
        self.assertEqual(response.status_code, 400)
        self.assertTrue(response.json()["error"].startswith("username length"))

    def test_email_type_error_reported_in_field_order(self) -> None:
        response = self.client.post("/register", json=_body(email=123, role="root"))
        self.assertEqual(response.status_code, 400)
        self.assertEqual(response.json(), {"error": "email must be a string"})

    def test_unknown_key_returns_400_after_field_rules(self) -> None:
        response = self.client.post("/register", json=_body(nickname="al"))
        self.assertEqual(response.status_code, 400)
        self.assertEqual(response.json(), {"error": "nickname is not allowed"})

        response = self.client.post("/register", json=_body(nickname="al", password="abc"))
        self.assertTrue(response.json()["error"].startswith("password"))
        self.assertEqual(self.client.get("/health").json()["accounts"], 0)

    def test_duplicate_username_returns_409(self) -> None:
        self.client.post("/register", json=_body())
        response = self.client.post("/register", json=_body(email="other@mailbox.org"))
        self.assertEqual(response.status_code, 409)
        self.assertEqual(response.json(), {"error": "Username already exists"})

    def test_duplicate_email_returns_409(self) -> None:
        self.client.post("/register", json=_body())
        response = self.client.post("/register", json=_body(username="bob"))
        self.assertEqual(response.status_code, 409)
        self.assertEqual(response.json(), {"error": "Email already exists"})


class TestLoginEndpoint(ApiTestCase):
    def setUp(self) -> None:
        super().setUp()
        self.client.post("/register", json=_body())

    def test_login_success_returns_200(self) -> None:
        response = self.client.post("/login", json={"username": "alice", "password": "Valid1!pass"})
        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.json(), {"message": "Login successful"})

    def test_wrong_password_and_unknown_user_look_identical(self) -> None:
        wrong = self.client.post("/login", json={"username": "alice", "password": "Wrong1!pass"})
        unknown = self.client.post("/login", json={"username": "nobody", "password": "Valid1!pass"})
        self.assertEqual(wrong.status_code, 401)
        self.assertEqual(unknown.status_code, 401)
        self.assertEqual(wrong.json(), unknown.json())
        self.assertEqual(wrong.json(), {"error": "Invalid credentials"})

    def test_missing_fields_are_invalid_credentials(self) -> None:
        response = self.client.post("/login", json={})
        self.assertEqual(response.status_code, 401)


class TestAppIsolation(unittest.TestCase):
    """Each create_app() call owns a fresh store."""

    def test_stores_are_not_shared(self) -> None:
        settings = Settings(BCRYPT_ROUNDS=4)
        first = TestClient(create_app(settings))
        second = TestClient(create_app(settings))
        first.post("/register", json=_body())
        response = second.post("/login", json={"username": "alice", "password": "Valid1!pass"})
        self.assertEqual(response.status_code, 401)


class TestLoggingSetup(unittest.TestCase):
    """Logging is configured by the factory, not only by the CLI entry point."""

    def test_create_app_configures_logging(self) -> None:
        with patch("app.main.logging.basicConfig") as basic_config:
            create_app(Settings(BCRYPT_ROUNDS=4, LOG_LEVEL="WARNING"))
        basic_config.assert_called_once()
        self.assertEqual(basic_config.call_args.kwargs["level"], "WARNING")


class TestCors(ApiTestCase):
    def test_allowed_origin_is_echoed(self) -> None:
        response = self.client.get("/", headers={"Origin": "http://localhost:4200"})
        self.assertEqual(response.headers.get("access-control-allow-origin"), "http://localhost:4200")

    def test_other_origin_is_not_allowed(self) -> None:
        response = self.client.get("/", headers={"Origin": "http://evil.example"})
        self.assertIsNone(response.headers.get("access-control-allow-origin"))


if __name__ == "__main__":
    unittest.main()
