"""
=============================================================================
투자 학습 시뮬레이터 (Simply Invest)
=============================================================================

[ 시스템 전체 구조 ]

    run_simulator.py (진입점)
         │
         ├── utils/config.py        ← config.yaml 설정 로드
         ├── utils/logger.py        ← 로깅
         │
         └── app.py::SimplyInvest   ← 컴포넌트 조립
               │
               ├── stores/                  ← 저장소 백엔드 (memory / json / clickhouse)
               ├── accounts/credentials.py  ← 가입/로그인, 사용자 레코드
               ├── accounts/session.py      ← 현재 사용자 조회/저장
               ├── data/price_oracle.py     ← 가격 랜덤워크
               └── data/portfolio.py        ← 매수/재평가/매도


[ 핵심 추상 클래스 (core/) ]

    core/storage.py  → stores/memory_store.py      (테스트용)
                     → stores/json_file_store.py   (로컬 파일)
                     → stores/clickhouse_store.py  (ClickHouse 테이블)

    core/results.py  → 모든 사용자 작업의 반환 타입 (성공 여부 + 사유 + 메시지)


[ 데이터 흐름 ]

    1. SessionAccessor가 세션 마커(currentUser)로 현재 사용자 레코드 조회
    2. PortfolioLedger가 해당 사용자의 잔고/보유분 갱신
    3. PriceOracle이 가격을 제공하고 랜덤워크로 갱신 (stockPrices)
    4. 변경된 사용자 레코드를 사용자 목록(users)에 다시 저장


[ 저장 키 ]

    users        사용자 레코드 배열 (JSON)
    stockPrices  symbol → 현재가 (JSON)
    currentUser  활성 사용자명
"""

__version__ = "0.1.0"
