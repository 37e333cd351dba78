"""
계정(자격 증명) 관리 모듈.

[ 역할 ]
    사용자 레코드 목록(users)을 저장소에 보관하고
    회원가입 / 로그인 / 로그아웃을 처리한다.
    로그인/가입 성공 시 세션 마커(currentUser)에 사용자명을 기록.

[ 검증 순서 ]
    register: 사용자명 누락 → 나이(숫자 아님 또는 13 미만) → 중복(대소문자 무시)
    login   : 사용자 없음 → 비밀번호 해시 불일치
    모든 검증은 저장소 변경 전에 끝나므로 실패한 호출은 상태를 바꾸지 않는다.

[ 호출하는 곳 ]
    - accounts/session.py::SessionAccessor (사용자 목록 로드/저장)
    - app.py::SimplyInvest.register/login/logout
"""

import hashlib
import logging
import math
from typing import Any, Optional

from simply_invest.core.results import FailureReason, OperationResult
from simply_invest.core.storage import SESSION_KEY, USERS_KEY, KeyValueStore
from simply_invest.data.models import User, dump_users, load_users

logger = logging.getLogger("simply_invest.accounts")


def hash_password(password: str) -> str:
    """비밀번호의 SHA-256 hex digest (소문자 64자)."""
    return hashlib.sha256(password.encode("utf-8")).hexdigest()


def _parse_age(age: Any) -> Optional[int]:
    """나이를 정수로 변환. 숫자가 아니면 None."""
    if isinstance(age, bool):
        return None
    try:
        value = float(age)
    except (TypeError, ValueError):
        return None
    if math.isnan(value) or math.isinf(value):
        return None
    return int(value)


class CredentialStore:
    """사용자 레코드 저장 + 인증.

    사용 예:
        credentials = CredentialStore(store)
        credentials.register("alice", 20, "secret")   # 코인 100000 지급
        credentials.login("ALICE", "secret")          # 대소문자 무시
    """

    def __init__(
        self,
        store: KeyValueStore,
        initial_coins: float = 100_000,   # 가입 시 지급 코인
        min_age: int = 13,                # 가입 최소 나이
    ):
        self.store = store
        self.initial_coins = initial_coins
        self.min_age = min_age

    # ─── 사용자 목록 ────────────────────────────────────────────────────

    def load_users(self) -> list[User]:
        return load_users(self.store.get(USERS_KEY))

    def save_users(self, users: list[User]) -> None:
        self.store.set(USERS_KEY, dump_users(users))

    def find_user(self, username: str) -> Optional[User]:
        """대소문자 무시 조회."""
        if not username:
            return None
        wanted = username.lower()
        for user in self.load_users():
            if user.username.lower() == wanted:
                return user
        return None

    # ─── 인증 ──────────────────────────────────────────────────────────

    def register(self, username: str, age: Any, password: str) -> OperationResult:
        """회원가입. 성공 시 해당 사용자를 활성 세션으로 지정."""
        username = (username or "").strip()
        if not username:
            return OperationResult.fail(FailureReason.MISSING_USERNAME)

        parsed_age = _parse_age(age)
        if parsed_age is None or parsed_age < self.min_age:
            logger.warning(f"가입 거부 (나이 제한): {username}")
            return OperationResult.fail(
                FailureReason.UNDERAGE,
                f"You must be at least {self.min_age} years old to register.",
            )

        users = self.load_users()
        if any(u.username.lower() == username.lower() for u in users):
            logger.warning(f"가입 거부 (중복 사용자명): {username}")
            return OperationResult.fail(FailureReason.DUPLICATE_USERNAME)

        users.append(User(
            username=username,
            age=parsed_age,
            password_hash=hash_password(password),
            coins=self.initial_coins,
            portfolio=[],
        ))
        self.save_users(users)
        self.store.set(SESSION_KEY, username)
        logger.info(f"가입 완료: {username} (코인 {self.initial_coins:,.0f})")
        return OperationResult.ok()

    def login(self, username: str, password: str) -> OperationResult:
        """로그인. 성공 시 저장된 사용자명으로 세션 지정."""
        user = self.find_user(username)
        if user is None:
            logger.warning(f"로그인 실패 (사용자 없음): {username}")
            return OperationResult.fail(FailureReason.USER_NOT_FOUND)

        if hash_password(password) != user.password_hash:
            logger.warning(f"로그인 실패 (비밀번호 불일치): {user.username}")
            return OperationResult.fail(FailureReason.BAD_CREDENTIAL)

        self.store.set(SESSION_KEY, user.username)
        logger.info(f"로그인: {user.username}")
        return OperationResult.ok()

    def logout(self) -> None:
        """세션 마커 제거."""
        username = self.store.get(SESSION_KEY)
        self.store.delete(SESSION_KEY)
        if username:
            logger.info(f"로그아웃: {username}")
