"""
ClickHouse 기반 저장소 구현.

[ 역할 ]
    ClickHouse 테이블에 키-값을 저장하여 여러 프로세스/머신이 같은 상태를 공유.
    KeyValueStore 인터페이스를 구현하여 다른 백엔드와 교체 가능.

[ 저장 방식 ]
    set/delete 모두 행을 추가(INSERT)만 한다. 조회 시 argMax(…, updated_at)로
    키별 최신 행을 고르고, 최신 행이 deleted=1이면 없는 키로 취급.

[ 의존성 ]
    - stores/clickhouse_schema.py (연결 및 테이블 생성)
"""

import logging
from datetime import datetime, timezone
from typing import Optional

from clickhouse_connect.driver import Client

from simply_invest.core.storage import KeyValueStore
from simply_invest.stores import register
from simply_invest.stores.clickhouse_schema import DEFAULT_TABLE, get_client, initialize_schema

logger = logging.getLogger("simply_invest.stores")

_COLUMNS = ["key", "value", "deleted", "updated_at"]


@register("clickhouse")
class ClickHouseStore(KeyValueStore):
    """ClickHouse 키-값 저장소.

    사용 예:
        store = ClickHouseStore('localhost', 8123, 'default', password='password')
        store.set('currentUser', 'alice')
    """

    def __init__(
        self,
        host: str = "localhost",
        port: int = 8123,
        database: str = "default",
        user: str = "default",
        password: str = "password",
        table: str = DEFAULT_TABLE,
        create_table: bool = True,
        client: Optional[Client] = None,
    ):
        """
        Args:
            host: ClickHouse 호스트
            port: HTTP 포트 (기본값: 8123)
            database: 데이터베이스 이름
            user: 사용자 이름
            password: 비밀번호
            table: 키-값 테이블 이름
            create_table: True이면 생성 시 테이블을 만든다
            client: 이미 연결된 클라이언트 (지정 시 host 등은 무시)
        """
        self.client: Client = client or get_client(host, port, database, user, password)
        self.table = table
        if create_table:
            initialize_schema(self.client, table)

    def _append(self, key: str, value: str, deleted: int) -> None:
        row = [key, value, deleted, datetime.now(timezone.utc)]
        self.client.insert(self.table, [row], column_names=_COLUMNS)

    def get(self, key: str) -> Optional[str]:
        query = f"""
            SELECT
                count() AS n,
                argMax(value, updated_at) AS value,
                argMax(deleted, updated_at) AS deleted
            FROM {self.table}
            WHERE key = %(key)s
        """
        result = self.client.query(query, parameters={"key": key})
        if not result.result_rows:
            return None

        n, value, deleted = result.result_rows[0]
        if n == 0 or deleted:
            return None
        return value

    def set(self, key: str, value: str) -> None:
        self._append(key, value, 0)
        logger.debug(f"ClickHouse 저장: {self.table}.{key}")

    def delete(self, key: str) -> None:
        self._append(key, "", 1)
        logger.debug(f"ClickHouse 삭제 표식: {self.table}.{key}")

    def keys(self) -> list[str]:
        query = f"""
            SELECT key
            FROM {self.table}
            GROUP BY key
            HAVING argMax(deleted, updated_at) = 0
            ORDER BY key
        """
        result = self.client.query(query)
        return [row[0] for row in result.result_rows]

    def close(self) -> None:
        self.client.close()

    def __repr__(self):
        return f"ClickHouseStore(table={self.table})"
