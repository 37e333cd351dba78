"""
세션 접근 모듈.

[ 역할 ]
    세션 마커(currentUser)를 저장된 사용자 레코드로 해석하고,
    변경된 레코드를 사용자 목록에 다시 써 넣는다.
    포트폴리오 작업은 전역 상태 대신 이 객체를 주입받아 현재 사용자를 얻는다.

[ 호출하는 곳 ]
    - data/portfolio.py::PortfolioLedger (current_user → 작업 → persist)
    - app.py::SimplyInvest.current_user
"""

from typing import Optional

from simply_invest.accounts.credentials import CredentialStore
from simply_invest.core.storage import SESSION_KEY
from simply_invest.data.models import User


class SessionAccessor:
    """현재 사용자 조회/저장."""

    def __init__(self, credentials: CredentialStore):
        self.credentials = credentials
        self.store = credentials.store

    def active_username(self) -> Optional[str]:
        """세션 마커 원본 값. 없으면 None."""
        return self.store.get(SESSION_KEY) or None

    def current_user(self) -> Optional[User]:
        """세션 마커와 정확히 일치하는 사용자. 세션이 없거나 레코드가 없으면 None."""
        username = self.active_username()
        if not username:
            return None
        for user in self.credentials.load_users():
            if user.username == username:
                return user
        return None

    def persist(self, user: User) -> bool:
        """같은 사용자명의 레코드를 제자리에서 교체. 없으면 아무것도 하지 않음."""
        users = self.credentials.load_users()
        for i, stored in enumerate(users):
            if stored.username == user.username:
                users[i] = user
                self.credentials.save_users(users)
                return True
        return False
