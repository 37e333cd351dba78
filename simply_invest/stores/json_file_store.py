"""
JSON 파일 기반 저장소.

[ 역할 ]
    파일 하나에 {key: value} JSON 객체를 저장. 브라우저 localStorage와 같은
    모양을 로컬 디스크에 유지한다.

[ 파일 갱신 방식 ]
    set/delete 때마다 파일 전체를 쓰기별 고유 임시 파일(mkstemp)에 쓰고 rename으로 교체.
    매 get마다 파일을 다시 읽으므로 여러 프로세스가 같은 파일을 써도
    마지막 쓰기가 이긴다.
"""

import json
import logging
import os
import tempfile
from pathlib import Path
from typing import Optional

from simply_invest.core.storage import KeyValueStore
from simply_invest.stores import register

logger = logging.getLogger("simply_invest.stores")


@register("json")
class JsonFileStore(KeyValueStore):
    """JSON 파일 저장소.

    사용법:
        store = JsonFileStore("data/simply_invest.json")
        store.set("currentUser", "alice")
    """

    def __init__(self, path: str | Path = "data/simply_invest.json"):
        self.path = Path(path)

    def _load(self) -> dict[str, str]:
        """파일 전체 로드. 파일이 없으면 빈 dict."""
        if not self.path.exists():
            return {}
        with open(self.path, "r", encoding="utf-8") as f:
            text = f.read()
        if not text.strip():
            return {}
        data = json.loads(text)
        if not isinstance(data, dict):
            raise ValueError(f"저장소 파일 형식 오류 (객체가 아님): {self.path}")
        return data

    def _dump(self, data: dict[str, str]) -> None:
        """쓰기마다 고유한 임시 파일에 쓴 뒤 원자적으로 교체."""
        self.path.parent.mkdir(parents=True, exist_ok=True)
        fd, tmp_name = tempfile.mkstemp(
            dir=self.path.parent, prefix=self.path.name + ".", suffix=".tmp"
        )
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                json.dump(data, f, ensure_ascii=False, indent=2)
            os.replace(tmp_name, self.path)
        except Exception:
            Path(tmp_name).unlink(missing_ok=True)
            raise
        logger.debug(f"저장소 파일 갱신: {self.path} ({len(data)} keys)")

    def get(self, key: str) -> Optional[str]:
        return self._load().get(key)

    def set(self, key: str, value: str) -> None:
        data = self._load()
        data[key] = value
        self._dump(data)

    def delete(self, key: str) -> None:
        data = self._load()
        if key in data:
            del data[key]
            self._dump(data)

    def keys(self) -> list[str]:
        return list(self._load().keys())

    def __repr__(self):
        return f"JsonFileStore({self.path})"
