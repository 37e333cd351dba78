#!/usr/bin/env python3
"""
ClickHouse 키-값 테이블 생성 및 연결 확인 스크립트
"""
import argparse
import sys
from pathlib import Path

# 프로젝트 루트를 sys.path에 추가
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from simply_invest.stores.clickhouse_schema import DEFAULT_TABLE, get_client, initialize_schema, verify_connection
from simply_invest.stores.clickhouse_store import ClickHouseStore
from simply_invest.utils.config import Config


def main():
    parser = argparse.ArgumentParser(description="ClickHouse 저장소 초기화")
    parser.add_argument("--config", type=str, default="config.yaml", help="설정 파일 경로")
    args = parser.parse_args()

    config_path = Path(args.config)
    config = Config.from_yaml(config_path) if config_path.exists() else Config()
    params = config.store.params if config.store.backend == "clickhouse" else {}

    print("=" * 60)
    print("ClickHouse 저장소 초기화")
    print("=" * 60)

    client = get_client(
        host=params.get("host", "localhost"),
        port=params.get("port", 8123),
        database=params.get("database", "default"),
        user=params.get("user", "default"),
        password=params.get("password", "password"),
    )

    print("\n[1] 연결 확인")
    if not verify_connection(client):
        print("ClickHouse에 연결할 수 없습니다.")
        sys.exit(1)
    print("연결 성공")

    table = params.get("table", DEFAULT_TABLE)
    print(f"\n[2] 테이블 생성: {table}")
    initialize_schema(client, table)
    print("테이블 생성 완료 (또는 이미 존재)")

    print("\n[3] 저장된 키 조회")
    store = ClickHouseStore(table=table, create_table=False, client=client)
    keys = store.keys()
    print(f"Keys: {keys if keys else '(없음)'}")

    store.close()
    print("\n" + "=" * 60)
    print("✓ 초기화 완료")
    print("=" * 60)


if __name__ == "__main__":
    main()
