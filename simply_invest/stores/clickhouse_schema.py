"""
ClickHouse 키-값 테이블 스키마 정의 및 연결 관리
"""
import clickhouse_connect
from clickhouse_connect.driver import Client

DEFAULT_TABLE = "simply_invest_kv"


def get_client(
    host: str = "localhost",
    port: int = 8123,
    database: str = "default",
    user: str = "default",
    password: str = "password",
) -> Client:
    """
    ClickHouse 클라이언트 연결 생성

    Args:
        host: ClickHouse 호스트
        port: HTTP 포트 (기본값: 8123)
        database: 데이터베이스 이름
        user: 사용자 이름
        password: 비밀번호

    Returns:
        ClickHouse 클라이언트 객체
    """
    client = clickhouse_connect.get_client(
        host=host,
        port=port,
        database=database,
        username=user,
        password=password,
    )
    return client


def initialize_schema(client: Client, table: str = DEFAULT_TABLE) -> None:
    """
    키-값 테이블 생성 (이미 존재하면 무시)

    행은 추가만 되고, 키별 최신 행(updated_at 최대)이 현재 값이다.
    deleted=1 행은 삭제 표식(tombstone).

    Args:
        client: ClickHouse 클라이언트
        table: 테이블 이름
    """
    create_kv_table = f"""
    CREATE TABLE IF NOT EXISTS {table} (
        key String,
        value String,
        deleted UInt8 DEFAULT 0,
        updated_at DateTime64(6) DEFAULT now64(6)
    )
    ENGINE = ReplacingMergeTree(updated_at)
    ORDER BY key
    """

    client.command(create_kv_table)


def verify_connection(client: Client) -> bool:
    """
    ClickHouse 연결 검증

    Args:
        client: ClickHouse 클라이언트

    Returns:
        연결 성공 시 True
    """
    try:
        result = client.command("SELECT 1")
        return result == 1
    except Exception as e:
        print(f"연결 실패: {e}")
        return False
