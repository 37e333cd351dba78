"""
메모리 기반 저장소.

[ 역할 ]
    dict 하나로 KeyValueStore를 구현. 프로세스 종료 시 내용이 사라진다.
    단위 테스트와 --store memory 실행에 사용.
"""

from typing import Optional

from simply_invest.core.storage import KeyValueStore
from simply_invest.stores import register


@register("memory")
class MemoryStore(KeyValueStore):
    """dict 기반 저장소.

    사용법:
        store = MemoryStore()
        store.set("currentUser", "alice")
        store.get("currentUser")  # "alice"
    """

    def __init__(self, initial: Optional[dict[str, str]] = None):
        self._data: dict[str, str] = dict(initial or {})

    def get(self, key: str) -> Optional[str]:
        return self._data.get(key)

    def set(self, key: str, value: str) -> None:
        self._data[key] = value

    def delete(self, key: str) -> None:
        self._data.pop(key, None)

    def keys(self) -> list[str]:
        return list(self._data.keys())

    def __repr__(self):
        return f"MemoryStore({len(self._data)} keys)"
