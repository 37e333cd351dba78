"""
test_models.py - 저장 포맷 테스트

users 항목은 브라우저 클라이언트와 공유하는 camelCase 키 이름을 유지해야 한다.
"""

import json

from simply_invest.data.catalog import FALLBACK_PRICE, base_price, get_stock, get_stocks, is_listed
from simply_invest.data.models import Holding, User, dump_users, load_users


def test_user_wire_keys():
    user = User("alice", 20, "ab" * 32, 99000.0, [Holding("AAPL", 6.5, 150.0, 975.0)])
    data = json.loads(dump_users([user]))[0]

    assert set(data) == {"username", "age", "passwordHash", "coins", "portfolio"}
    assert data["portfolio"] == [
        {"symbol": "AAPL", "quantity": 6.5, "priceAtPurchase": 150.0, "investedAmount": 975.0}
    ]


def test_load_legacy_record():
    text = json.dumps([{
        "username": "bob",
        "age": "15",
        "passwordHash": "00" * 32,
        "coins": 100000,
        "portfolio": [],
    }])
    [user] = load_users(text)
    assert user.age == 15
    assert user.coins == 100000.0
    assert user.invested_value == 0


def test_load_empty():
    assert load_users(None) == []
    assert load_users("") == []


def test_catalog():
    assert [s.symbol for s in get_stocks()] == [
        "AAPL", "AMZN", "TSLA", "GOOG", "NFLX", "NVDA", "MSFT", "META",
    ]
    assert get_stock("META").name == "Meta Platforms Inc."
    assert get_stock("ZZZZ") is None
    assert is_listed("NVDA") and not is_listed("nvda")
    assert base_price("AMZN") == 3200
    assert base_price("ZZZZ") == FALLBACK_PRICE == 100


def test_load_fractional_age():
    text = json.dumps([
        {"username": "carol", "age": "15.5", "passwordHash": "11" * 32, "coins": 1, "portfolio": []},
        {"username": "dave", "age": 40, "passwordHash": "22" * 32, "coins": 2, "portfolio": []},
    ])
    users = load_users(text)
    assert [(u.username, u.age) for u in users] == [("carol", 15), ("dave", 40)]
