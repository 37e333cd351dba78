"""
키-값 저장소 추상 클래스 정의.

[ 역할 ]
    사용자 목록, 주가 테이블, 세션 마커를 저장하는 인터페이스.
    전역 저장 공간 대신 명시적 객체로 분리하여
    각 컴포넌트에 주입한다. 값은 항상 문자열(JSON 텍스트 또는 사용자명).

[ 구현체 ]
    - stores/memory_store.py::MemoryStore          (테스트용)
    - stores/json_file_store.py::JsonFileStore     (로컬 파일)
    - stores/clickhouse_store.py::ClickHouseStore  (ClickHouse 테이블)

[ 호출하는 곳 ]
    - data/price_oracle.py (stockPrices)
    - accounts/credentials.py (users, currentUser)
    - accounts/session.py (currentUser)
"""

from abc import ABC, abstractmethod
from typing import Optional


# ─── 저장 키 ────────────────────────────────────────────────────────────────

USERS_KEY = "users"                # 사용자 레코드 배열 (JSON)
PRICES_KEY = "stockPrices"         # symbol → 현재가 (JSON)
SESSION_KEY = "currentUser"        # 활성 사용자명 (plain string)


class KeyValueStore(ABC):
    """키-값 저장소 추상 클래스.

    읽기-수정-쓰기는 항상 값 전체 단위로 일어나며, 동시 쓰기는
    마지막 쓰기가 이긴다.
    """

    @abstractmethod
    def get(self, key: str) -> Optional[str]:
        """값 조회. 없으면 None."""
        ...

    @abstractmethod
    def set(self, key: str, value: str) -> None:
        """값 저장 (덮어쓰기)."""
        ...

    @abstractmethod
    def delete(self, key: str) -> None:
        """값 삭제. 없는 키는 무시."""
        ...

    @abstractmethod
    def keys(self) -> list[str]:
        """저장된 키 목록."""
        ...

    def close(self) -> None:
        """연결 해제 (필요한 구현체만 오버라이드)."""
        return None

    def __contains__(self, key: str) -> bool:
        return self.get(key) is not None
