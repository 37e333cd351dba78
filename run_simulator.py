"""
투자 시뮬레이터 실행 스크립트 (시스템 진입점).

[ 사용법 ]
    # 회원가입 / 로그인 / 로그아웃
    python run_simulator.py register alice 20 secret
    python run_simulator.py login alice secret
    python run_simulator.py logout
    python run_simulator.py whoami

    # 종목 목록 (현재가 포함)
    python run_simulator.py stocks

    # 매수 / 재평가 / 매도
    python run_simulator.py buy AAPL 1000
    python run_simulator.py update
    python run_simulator.py sell 0

    # 포트폴리오 요약
    python run_simulator.py portfolio

    # 시장 가격을 N회 움직이기
    python run_simulator.py tick --steps 5

    # 작업 결과를 JSON으로 출력
    python run_simulator.py --json buy AAPL 1000

    # 저장소 지정 (config.yaml 대신)
    python run_simulator.py --store memory stocks
    python run_simulator.py list-stores
"""

import argparse
import json
import sys
from pathlib import Path

from simply_invest.app import SimplyInvest
from simply_invest.core.results import OperationResult
from simply_invest.stores import list_stores
from simply_invest.utils.config import Config
from simply_invest.utils.logger import setup_logger


def load_config(path: str) -> Config:
    """설정 파일 로드. 없으면 기본값."""
    config_path = Path(path)
    if not config_path.exists():
        print(f"설정 파일 없음: {config_path}, 기본값 사용")
        return Config()
    if config_path.suffix == ".json":
        return Config.from_json(config_path)
    return Config.from_yaml(config_path)


def report(result: OperationResult, success_text: str, as_json: bool = False) -> int:
    """결과 출력 후 종료 코드 반환. as_json이면 결과 딕셔너리를 JSON 한 줄로 출력."""
    if as_json:
        print(json.dumps(result.to_dict(), ensure_ascii=False))
        return 0 if result.success else 1
    if result.success:
        print(success_text)
        return 0
    print(f"실패: {result.message}")
    return 1


def cmd_register(app: SimplyInvest, args: argparse.Namespace) -> int:
    result = app.register(args.username, args.age, args.password)
    return report(
        result,
        f"가입 완료: {args.username} (코인 {app.config.simulation.initial_coins:,.0f})",
        args.json,
    )


def cmd_login(app: SimplyInvest, args: argparse.Namespace) -> int:
    return report(app.login(args.username, args.password), f"로그인: {args.username}", args.json)


def cmd_logout(app: SimplyInvest, args: argparse.Namespace) -> int:
    app.logout()
    print("로그아웃 완료")
    return 0


def cmd_whoami(app: SimplyInvest, args: argparse.Namespace) -> int:
    user = app.current_user()
    if user is None:
        print("로그인하지 않음")
        return 1
    print(f"{user.username} (나이 {user.age}, 코인 {user.coins:,.2f})")
    return 0


def cmd_stocks(app: SimplyInvest, args: argparse.Namespace) -> int:
    print(f"{'심볼':<6} {'종목명':<22} {'현재가':>10}")
    print("-" * 40)
    for stock, price in app.stocks():
        print(f"{stock.symbol:<6} {stock.name:<22} {price:>10,.2f}")
    return 0


def cmd_buy(app: SimplyInvest, args: argparse.Namespace) -> int:
    result = app.buy(args.symbol.upper(), args.amount)
    if result.success:
        return report(result, f"매수: {args.symbol.upper()} {result.quantity:.4f}주 @ {result.price:,.2f}", args.json)
    return report(result, "", args.json)


def cmd_update(app: SimplyInvest, args: argparse.Namespace) -> int:
    result = app.revalue()
    if not result.success or args.json:
        return report(result, "", args.json)
    summary = app.summary()
    return report(result, f"재평가 완료. 코인 {summary['coins']:,.2f}")


def cmd_sell(app: SimplyInvest, args: argparse.Namespace) -> int:
    result = app.sell(args.index)
    if result.success:
        return report(result, f"매도: {result.quantity:.4f}주 @ {result.price:,.2f} → {result.proceeds:,.2f} 코인", args.json)
    return report(result, "", args.json)


def cmd_portfolio(app: SimplyInvest, args: argparse.Namespace) -> int:
    summary = app.summary()
    if summary is None:
        print("실패: Not logged in.")
        return 1

    print(f"\n[{summary['username']}]")
    print(f"  코인 잔고:   {summary['coins']:>14,.2f}")
    print(f"  평가 금액:   {summary['total_invested']:>14,.2f}")
    print(f"  총 자산:     {summary['total_assets']:>14,.2f}")
    print(f"  보유 건수:   {summary['num_holdings']:>14}")

    df = app.holdings_frame()
    if not df.empty:
        print()
        print(df.to_string(index=False, float_format=lambda v: f"{v:,.4f}"))
    return 0


def cmd_tick(app: SimplyInvest, args: argparse.Namespace) -> int:
    if args.steps < 1:
        print("실패: steps는 1 이상이어야 합니다.")
        return 1
    df = app.tick(args.steps)
    table = df.pivot(index="step", columns="symbol", values="price")
    print(table.to_string(float_format=lambda v: f"{v:,.2f}"))
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="투자 학습 시뮬레이터")
    parser.add_argument("--config", type=str, default="config.yaml", help="설정 파일 경로")
    parser.add_argument("--store", type=str, default=None, help="저장소 백엔드 (config.yaml 대신 지정)")
    parser.add_argument("--json", action="store_true", help="작업 결과를 JSON으로 출력 (register/login/buy/update/sell)")
    sub = parser.add_subparsers(dest="command", required=True)

    p = sub.add_parser("register", help="회원가입")
    p.add_argument("username")
    p.add_argument("age")
    p.add_argument("password")
    p.set_defaults(func=cmd_register)

    p = sub.add_parser("login", help="로그인")
    p.add_argument("username")
    p.add_argument("password")
    p.set_defaults(func=cmd_login)

    sub.add_parser("logout", help="로그아웃").set_defaults(func=cmd_logout)
    sub.add_parser("whoami", help="현재 사용자").set_defaults(func=cmd_whoami)
    sub.add_parser("stocks", help="종목 목록").set_defaults(func=cmd_stocks)

    p = sub.add_parser("buy", help="매수")
    p.add_argument("symbol")
    p.add_argument("amount")
    p.set_defaults(func=cmd_buy)

    sub.add_parser("update", help="포트폴리오 재평가").set_defaults(func=cmd_update)

    p = sub.add_parser("sell", help="보유분 매도")
    p.add_argument("index", type=int)
    p.set_defaults(func=cmd_sell)

    sub.add_parser("portfolio", help="포트폴리오 요약").set_defaults(func=cmd_portfolio)

    p = sub.add_parser("tick", help="시장 가격 갱신")
    p.add_argument("--steps", type=int, default=1)
    p.set_defaults(func=cmd_tick)

    sub.add_parser("list-stores", help="저장소 백엔드 목록")
    return parser


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.command == "list-stores":
        print("등록된 저장소:")
        for name in list_stores():
            print(f"  - {name}")
        return 0

    config = load_config(args.config)
    # 백엔드를 바꾸면 기존 params는 맞지 않으므로 각 백엔드 기본값 사용
    if args.store and args.store != config.store.backend:
        config.store.backend = args.store
        config.store.params = {}

    # 결과는 print로 보여주므로 로그는 파일에만 기록
    setup_logger(level=config.log_level, log_dir=config.log_dir, console=False)

    app = SimplyInvest.from_config(config)
    try:
        return args.func(app, args)
    finally:
        app.close()


if __name__ == "__main__":
    sys.exit(main())
