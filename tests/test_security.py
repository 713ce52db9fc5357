"""Unit tests for userauth.core.security: bcrypt hashing and JWT issue/verify."""

import unittest
from datetime import UTC, datetime, timedelta

import jwt
from pydantic import SecretStr

from userauth.core.config import Settings
from userauth.core.security import (
    create_access_token,
    decode_access_token,
    hash_password,
    verify_password,
)


def _settings(**overrides: object) -> Settings:
    values: dict[str, object] = {
        "JWT_SECRET": SecretStr("unit-test-secret-0123456789abcdef"),
        "JWT_EXPIRE_MINUTES": 60,
        "BCRYPT_ROUNDS": 4,
    }
    values.update(overrides)
    return Settings(_env_file=None, **values)


class TestPasswordHashing(unittest.TestCase):
    """hash_password produces salted bcrypt hashes that verify_password accepts."""

    def test_hash_verifies_and_is_not_plaintext(self) -> None:
        hashed = hash_password("Secret123!", rounds=4)
        self.assertNotIn("Secret123!", hashed)
        self.assertTrue(hashed.startswith("$2"))
        self.assertTrue(verify_password("Secret123!", hashed))

    def test_wrong_password_rejected(self) -> None:
        hashed = hash_password("Secret123!", rounds=4)
        self.assertFalse(verify_password("secret123!", hashed))

    def test_same_password_gets_different_salt(self) -> None:
        self.assertNotEqual(hash_password("same", rounds=4), hash_password("same", rounds=4))

    def test_cost_factor_is_encoded_in_hash(self) -> None:
        hashed = hash_password("pw", rounds=5)
        self.assertEqual(hashed.split("$")[2], "05")

    def test_malformed_or_empty_hash_is_false(self) -> None:
        self.assertFalse(verify_password("pw", "not-a-bcrypt-hash"))
        self.assertFalse(verify_password("pw", ""))


class TestAccessToken(unittest.TestCase):
    """create_access_token / decode_access_token round trip and expiry."""

    def test_claims_round_trip(self) -> None:
        settings = _settings()
        token = create_access_token(7, "alice", settings)
        payload = decode_access_token(token, settings)
        self.assertEqual(payload["sub"], "7")
        self.assertEqual(payload["username"], "alice")
        self.assertEqual(payload["exp"] - payload["iat"], 60 * 60)

    def test_accepted_before_expiry(self) -> None:
        settings = _settings()
        issued = datetime.now(UTC) - timedelta(minutes=59)
        token = create_access_token(1, "alice", settings, now=issued)
        self.assertEqual(decode_access_token(token, settings)["sub"], "1")

    def test_rejected_after_expiry(self) -> None:
        settings = _settings()
        issued = datetime.now(UTC) - timedelta(minutes=61)
        token = create_access_token(1, "alice", settings, now=issued)
        with self.assertRaises(jwt.ExpiredSignatureError):
            decode_access_token(token, settings)

    def test_rejected_with_other_secret(self) -> None:
        token = create_access_token(1, "alice", _settings())
        other = _settings(JWT_SECRET=SecretStr("another-secret-0123456789abcdef"))
        with self.assertRaises(jwt.InvalidSignatureError):
            decode_access_token(token, other)

    def test_rejects_token_without_expiry(self) -> None:
        settings = _settings()
        token = jwt.encode(
            {"sub": "1", "iat": datetime.now(UTC)},
            settings.JWT_SECRET.get_secret_value(),
            algorithm="HS256",
        )
        with self.assertRaises(jwt.MissingRequiredClaimError):
            decode_access_token(token, settings)

    def test_rejects_garbage(self) -> None:
        with self.assertRaises(jwt.PyJWTError):
            decode_access_token("not.a.jwt", _settings())


if __name__ == "__main__":
    unittest.main()
