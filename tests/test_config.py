"""Settings validation: required secret, prod hardening, URL checks."""

import os
import unittest
from unittest.mock import patch

from pydantic import ValidationError

from userauth.core.config import Settings

SECRET = "x" * 40


class TestJwtSecretRequired(unittest.TestCase):
    """Start-up fails when JWT_SECRET is missing or blank instead of using a default."""

    def test_missing_secret_fails(self) -> None:
        env = {k: v for k, v in os.environ.items() if k.upper() != "JWT_SECRET"}
        with patch.dict(os.environ, env, clear=True):
            with self.assertRaises(ValidationError):
                Settings(_env_file=None)

    def test_blank_secret_fails(self) -> None:
        with self.assertRaises(ValidationError):
            Settings(_env_file=None, JWT_SECRET="   ")

    def test_secret_from_environment(self) -> None:
        with patch.dict(os.environ, {"JWT_SECRET": SECRET}):
            s = Settings(_env_file=None)
        self.assertEqual(s.JWT_SECRET.get_secret_value(), SECRET)


class TestProdHardening(unittest.TestCase):
    def test_short_secret_rejected_in_prod(self) -> None:
        with self.assertRaises(ValidationError):
            Settings(_env_file=None, APP_ENV="prod", JWT_SECRET="short", BCRYPT_ROUNDS=12)

    def test_low_bcrypt_cost_rejected_in_prod(self) -> None:
        with self.assertRaises(ValidationError):
            Settings(_env_file=None, APP_ENV="prod", JWT_SECRET=SECRET, BCRYPT_ROUNDS=10)

    def test_low_bcrypt_cost_allowed_in_dev(self) -> None:
        s = Settings(_env_file=None, APP_ENV="dev", JWT_SECRET="short", BCRYPT_ROUNDS=4)
        self.assertEqual(s.BCRYPT_ROUNDS, 4)

    def test_reset_never_enabled_in_prod(self) -> None:
        s = Settings(
            _env_file=None,
            APP_ENV="prod",
            JWT_SECRET=SECRET,
            BCRYPT_ROUNDS=12,
            ALLOW_USER_RESET=True,
        )
        self.assertFalse(s.user_reset_enabled)

    def test_reset_enabled_in_dev_only_when_allowed(self) -> None:
        self.assertFalse(Settings(_env_file=None, JWT_SECRET=SECRET, ALLOW_USER_RESET=False).user_reset_enabled)
        self.assertTrue(Settings(_env_file=None, JWT_SECRET=SECRET, ALLOW_USER_RESET=True).user_reset_enabled)


class TestFieldValidators(unittest.TestCase):
    def test_database_url_must_be_postgres_or_sqlite(self) -> None:
        with self.assertRaises(ValidationError):
            Settings(_env_file=None, JWT_SECRET=SECRET, DATABASE_URL="mysql://u:p@localhost/db")
        s = Settings(_env_file=None, JWT_SECRET=SECRET, DATABASE_URL=" sqlite:///./a.db ")
        self.assertEqual(s.DATABASE_URL, "sqlite:///./a.db")

    def test_expire_minutes_bounds(self) -> None:
        with self.assertRaises(ValidationError):
            Settings(_env_file=None, JWT_SECRET=SECRET, JWT_EXPIRE_MINUTES=0)
        with self.assertRaises(ValidationError):
            Settings(_env_file=None, JWT_SECRET=SECRET, JWT_EXPIRE_MINUTES=10081)

    def test_default_expiry_is_24_hours(self) -> None:
        with patch.dict(os.environ, {}, clear=False):
            os.environ.pop("JWT_EXPIRE_MINUTES", None)
            s = Settings(_env_file=None, JWT_SECRET=SECRET)
        self.assertEqual(s.JWT_EXPIRE_MINUTES, 1440)

    def test_only_hmac_algorithms(self) -> None:
        with self.assertRaises(ValidationError):
            Settings(_env_file=None, JWT_SECRET=SECRET, JWT_ALGORITHM="RS256")
        self.assertEqual(
            Settings(_env_file=None, JWT_SECRET=SECRET, JWT_ALGORITHM="hs512").JWT_ALGORITHM,
            "HS512",
        )

    def test_api_prefix_normalized(self) -> None:
        self.assertEqual(Settings(_env_file=None, JWT_SECRET=SECRET, API_PREFIX="/api/").API_PREFIX, "/api")
        with self.assertRaises(ValidationError):
            Settings(_env_file=None, JWT_SECRET=SECRET, API_PREFIX="api")

    def test_cors_origins_default_by_env(self) -> None:
        dev = Settings(_env_file=None, JWT_SECRET=SECRET, APP_ENV="dev")
        prod = Settings(_env_file=None, JWT_SECRET=SECRET, APP_ENV="prod", BCRYPT_ROUNDS=12)
        self.assertEqual(dev.cors_origins, ["*"])
        self.assertEqual(prod.cors_origins, [])


if __name__ == "__main__":
    unittest.main()
