"""
로깅 모듈.

[ 역할 ]
    "simply_invest" 로거 트리에 파일(일별) + 콘솔 핸들러를 붙인다.
    CLI 출력과 섞이지 않도록 콘솔은 stderr로, 기본 WARNING 이상만 출력.
    비밀번호와 해시는 어떤 레벨에서도 기록하지 않는다.

[ 로그 파일 위치 ]
    {log_dir}/{name}_{YYYYMMDD}.log (예: logs/simply_invest_20240601.log)
    log_dir=None이면 파일 핸들러 없이 콘솔만 사용.

[ 하위 로거 ]
    simply_invest.accounts   가입/로그인/로그아웃
    simply_invest.portfolio  매수/매도/재평가
    simply_invest.prices     가격 초기화/변동 (DEBUG)
    simply_invest.stores     저장소 파일/테이블 갱신 (DEBUG)
"""

import logging
import sys
from datetime import datetime
from pathlib import Path
from typing import Optional

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def setup_logger(
    name: str = "simply_invest",
    level: str = "INFO",
    log_dir: Optional[str] = "logs",
    console: bool = True,
    console_level: str = "WARNING",
) -> logging.Logger:
    """로거 설정. 이미 핸들러가 있으면 레벨만 갱신하고 그대로 반환."""
    logger = logging.getLogger(name)
    logger.setLevel(getattr(logging, level.upper()))

    if logger.handlers:
        return logger

    formatter = logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT)

    if log_dir:
        log_path = Path(log_dir)
        log_path.mkdir(parents=True, exist_ok=True)
        today = datetime.now().strftime("%Y%m%d")
        file_handler = logging.FileHandler(log_path / f"{name}_{today}.log", encoding="utf-8")
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    if console:
        console_handler = logging.StreamHandler(sys.stderr)
        console_handler.setLevel(getattr(logging, console_level.upper()))
        console_handler.setFormatter(formatter)
        logger.addHandler(console_handler)

    return logger
