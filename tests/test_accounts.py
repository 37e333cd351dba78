"""
test_accounts.py - 계정 / 세션 테스트

- 비밀번호 해시
- 회원가입 검증 (사용자명, 나이, 중복)
- 로그인 / 로그아웃과 세션 마커
- SessionAccessor.current_user / persist
"""

import logging

import pytest

from simply_invest.accounts.credentials import CredentialStore, hash_password
from simply_invest.accounts.session import SessionAccessor
from simply_invest.core.results import FailureReason
from simply_invest.core.storage import SESSION_KEY, USERS_KEY


@pytest.fixture
def credentials(store):
    return CredentialStore(store)


@pytest.fixture
def session(credentials):
    return SessionAccessor(credentials)


class TestHashPassword:

    def test_sha256_hex(self):
        assert hash_password("secret") == (
            "2bb80d537b1da3e38bd30361aa855686bde0eacd7162fef6a25fe97bf527a25b"
        )

    def test_fixed_length_lowercase(self):
        digest = hash_password("")
        assert len(digest) == 64
        assert digest == digest.lower()


class TestRegister:
    """회원가입."""

    def test_creates_user_and_session(self, credentials, session, store):
        result = credentials.register("alice", 20, "secret")

        assert result.success
        assert store.get(SESSION_KEY) == "alice"
        user = session.current_user()
        assert user.username == "alice"
        assert user.age == 20
        assert user.coins == 100000
        assert user.portfolio == []
        assert user.password_hash == hash_password("secret")

    def test_age_as_string(self, credentials):
        assert credentials.register("bob", "13", "pw").success
        assert credentials.find_user("bob").age == 13

    @pytest.mark.parametrize("username", ["", None, "   "])
    def test_missing_username(self, credentials, store, username):
        result = credentials.register(username, 20, "pw")
        assert result.reason == FailureReason.MISSING_USERNAME
        assert result.message == "Username is required."
        assert store.get(USERS_KEY) is None

    @pytest.mark.parametrize("age", [12, 0, -1, "12", "abc", None, float("nan")])
    def test_underage_or_not_a_number(self, credentials, store, age):
        result = credentials.register("kid", age, "pw")
        assert result.reason == FailureReason.UNDERAGE
        assert result.message == "You must be at least 13 years old to register."
        assert credentials.load_users() == []
        assert store.get(SESSION_KEY) is None

    def test_duplicate_is_case_insensitive(self, credentials, store):
        credentials.register("alice", 20, "secret")
        credentials.logout()

        result = credentials.register("ALICE", 30, "other")

        assert result.reason == FailureReason.DUPLICATE_USERNAME
        users = credentials.load_users()
        assert len(users) == 1
        assert users[0].username == "alice"
        assert users[0].age == 20
        assert users[0].password_hash == hash_password("secret")
        assert store.get(SESSION_KEY) is None

    def test_custom_limits(self, store):
        credentials = CredentialStore(store, initial_coins=500, min_age=18)
        assert credentials.register("teen", 17, "pw").message == (
            "You must be at least 18 years old to register."
        )
        credentials.register("adult", 18, "pw")
        assert credentials.find_user("adult").coins == 500


class TestLogin:
    """로그인 / 로그아웃."""

    def test_login_case_insensitive_sets_stored_name(self, credentials, store):
        credentials.register("Alice", 20, "secret")
        credentials.logout()

        result = credentials.login("aLiCe", "secret")

        assert result.success
        assert store.get(SESSION_KEY) == "Alice"

    def test_user_not_found(self, credentials, store):
        result = credentials.login("nobody", "pw")
        assert result.reason == FailureReason.USER_NOT_FOUND
        assert result.message == "User not found."
        assert store.get(SESSION_KEY) is None

    def test_wrong_password_keeps_session(self, credentials, store):
        credentials.register("alice", 20, "secret")
        credentials.register("bob", 20, "hunter2")
        assert store.get(SESSION_KEY) == "bob"

        result = credentials.login("alice", "wrong")

        assert result.reason == FailureReason.BAD_CREDENTIAL
        assert result.message == "Incorrect password."
        assert store.get(SESSION_KEY) == "bob"

    def test_logout_clears_marker(self, credentials, session):
        credentials.register("alice", 20, "secret")
        credentials.logout()
        assert session.current_user() is None
        assert session.active_username() is None

    def test_logout_without_session(self, credentials):
        credentials.logout()

    def test_secrets_not_logged(self, credentials, caplog):
        with caplog.at_level(logging.DEBUG, logger="simply_invest"):
            credentials.register("alice", 20, "topsecret")
            credentials.login("alice", "wrongsecret")
            credentials.login("alice", "topsecret")

        assert "topsecret" not in caplog.text
        assert "wrongsecret" not in caplog.text
        assert hash_password("topsecret") not in caplog.text


class TestSessionAccessor:
    """현재 사용자 조회 / 저장."""

    def test_no_session(self, session):
        assert session.current_user() is None

    def test_marker_without_record(self, session, store):
        store.set(SESSION_KEY, "ghost")
        assert session.current_user() is None

    def test_marker_match_is_exact(self, credentials, session, store):
        credentials.register("alice", 20, "secret")
        store.set(SESSION_KEY, "ALICE")
        assert session.current_user() is None

    def test_persist_overwrites_in_place(self, credentials, session):
        credentials.register("alice", 20, "a")
        credentials.register("bob", 30, "b")
        credentials.login("alice", "a")

        user = session.current_user()
        user.coins = 42
        assert session.persist(user)

        users = credentials.load_users()
        assert [u.username for u in users] == ["alice", "bob"]
        assert users[0].coins == 42
        assert users[1].coins == 100000

    def test_persist_unknown_user_is_noop(self, credentials, session, store):
        credentials.register("alice", 20, "a")
        before = store.get(USERS_KEY)
        user = session.current_user()
        user.username = "mallory"

        assert session.persist(user) is False
        assert store.get(USERS_KEY) == before
