"""
Unit tests for registration, login, password hashing and session tokens.

Run with: pytest tests/test_identity.py -v
"""

import asyncio
import json

import jwt
import pytest

from branchchat.application.commands.auth import (
    AuthenticateUserCommand,
    AuthenticateUserHandler,
    RegisterUserCommand,
    RegisterUserHandler,
)
from branchchat.config.settings import Config
from branchchat.domain.exceptions import (
    DomainValidationError,
    DuplicateUsernameError,
    InvalidCredentialsError,
)
from branchchat.domain.value_objects.username import Username


def _register(user_repo, password_hasher, username, password):
    handler = RegisterUserHandler(user_repo, password_hasher)
    return asyncio.run(
        handler.execute(RegisterUserCommand(username=username, password=password))
    )


def _login(user_repo, password_hasher, token_issuer, username, password):
    handler = AuthenticateUserHandler(user_repo, password_hasher, token_issuer)
    return asyncio.run(
        handler.execute(AuthenticateUserCommand(username=username, password=password))
    )


class TestRegister:
    def test_register_stores_hash_not_password(self, user_repo, password_hasher):
        user_id = _register(user_repo, password_hasher, "alice", "pw1")

        with open(Config.users_path(), encoding="utf-8") as f:
            records = json.load(f)

        assert len(records) == 1
        assert records[0]["id"] == user_id.value
        assert records[0]["username"] == "alice"
        assert records[0]["passwordHash"] != "pw1"
        assert records[0]["passwordHash"].startswith("$2")

    def test_register_assigns_distinct_ids(self, user_repo, password_hasher):
        alice = _register(user_repo, password_hasher, "alice", "pw1")
        bob = _register(user_repo, password_hasher, "bob", "pw2")

        assert alice != bob

    def test_duplicate_username_rejected(self, user_repo, password_hasher):
        _register(user_repo, password_hasher, "alice", "pw1")

        with pytest.raises(DuplicateUsernameError):
            _register(user_repo, password_hasher, "alice", "other")

    def test_usernames_are_case_sensitive(self, user_repo, password_hasher):
        _register(user_repo, password_hasher, "alice", "pw1")
        _register(user_repo, password_hasher, "Alice", "pw1")

        assert asyncio.run(user_repo.get_by_username(Username("Alice"))) is not None

    @pytest.mark.parametrize(
        "username,password",
        [(None, "pw"), ("alice", None), ("", "pw"), ("alice", ""), ("   ", "pw")],
    )
    def test_missing_fields_rejected(self, user_repo, password_hasher, username, password):
        with pytest.raises(DomainValidationError):
            _register(user_repo, password_hasher, username, password)

    def test_concurrent_registrations_keep_one_user(self, user_repo, password_hasher):
        handler = RegisterUserHandler(user_repo, password_hasher)

        async def register_twice():
            return await asyncio.gather(
                handler.execute(RegisterUserCommand(username="carol", password="a")),
                handler.execute(RegisterUserCommand(username="carol", password="b")),
                return_exceptions=True,
            )

        results = asyncio.run(register_twice())

        assert sum(isinstance(r, DuplicateUsernameError) for r in results) == 1
        with open(Config.users_path(), encoding="utf-8") as f:
            assert [r["username"] for r in json.load(f)] == ["carol"]


class TestLogin:
    def test_login_returns_token_for_user(self, user_repo, password_hasher, token_issuer):
        user_id = _register(user_repo, password_hasher, "alice", "pw1")

        result = _login(user_repo, password_hasher, token_issuer, "alice", "pw1")

        assert result.user_id == user_id
        claims = token_issuer.decode(result.token)
        assert claims["sub"] == user_id.value
        assert claims["username"] == "alice"

    def test_wrong_password_and_unknown_user_look_the_same(
        self, user_repo, password_hasher, token_issuer
    ):
        _register(user_repo, password_hasher, "alice", "pw1")

        with pytest.raises(InvalidCredentialsError) as wrong_password:
            _login(user_repo, password_hasher, token_issuer, "alice", "nope")
        with pytest.raises(InvalidCredentialsError) as unknown_user:
            _login(user_repo, password_hasher, token_issuer, "mallory", "pw1")

        assert str(wrong_password.value) == str(unknown_user.value)

    def test_missing_fields_rejected(self, user_repo, password_hasher, token_issuer):
        with pytest.raises(DomainValidationError):
            _login(user_repo, password_hasher, token_issuer, "alice", None)

    @pytest.mark.parametrize("password", ["p" * 80, "\u00e9" * 50])
    def test_passwords_longer_than_72_bytes(
        self, user_repo, password_hasher, token_issuer, password
    ):
        user_id = _register(user_repo, password_hasher, "alice", password)

        result = _login(user_repo, password_hasher, token_issuer, "alice", password)

        assert result.user_id == user_id


class TestBcryptPasswordHasher:
    def test_hash_and_verify(self, password_hasher):
        hashed = asyncio.run(password_hasher.hash("secret"))

        assert asyncio.run(password_hasher.verify("secret", hashed)) is True
        assert asyncio.run(password_hasher.verify("Secret", hashed)) is False

    def test_salted(self, password_hasher):
        first = asyncio.run(password_hasher.hash("secret"))
        second = asyncio.run(password_hasher.hash("secret"))

        assert first != second

    def test_malformed_hash_does_not_verify(self, password_hasher):
        assert asyncio.run(password_hasher.verify("secret", "not-a-hash")) is False


class TestJwtTokenIssuer:
    def test_token_rejected_with_other_secret(self, user_repo, password_hasher, token_issuer):
        _register(user_repo, password_hasher, "alice", "pw1")
        result = _login(user_repo, password_hasher, token_issuer, "alice", "pw1")

        with pytest.raises(jwt.InvalidSignatureError):
            jwt.decode(
                result.token,
                "other-secret",
                algorithms=["HS256"],
                audience="branchchat-test-web",
            )

    def test_token_expires(self, user_repo, password_hasher, token_issuer):
        _register(user_repo, password_hasher, "alice", "pw1")
        user = asyncio.run(user_repo.get_by_username(Username("alice")))
        expired = jwt.encode(
            {
                "sub": user.id.value,
                "iat": 0,
                "exp": 1,
                "iss": "branchchat-test",
                "aud": "branchchat-test-web",
            },
            "test-secret",
            algorithm="HS256",
        )

        with pytest.raises(jwt.ExpiredSignatureError):
            token_issuer.decode(expired)
