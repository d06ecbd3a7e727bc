"""Query Decisions — tests for integer parsing and the simulated rate limit.

Tests cover:
    - parse_int32 accepts signed integers with surrounding whitespace
    - parse_int32 rejects decimals, underscores, non-ASCII digits, overflow
    - parse_int32 only accepts ASCII whitespace as padding
    - decide_query_value: 400 iff missing or not an integer
    - decide_rate: 429 strictly above 5, echoes the count otherwise
"""

import pytest

from statuslab.core.decide_queries import (
    decide_query_value,
    decide_rate,
    parse_int32,
)
from statuslab.core.domain_types import RATE_LIMIT


# ─── parse_int32 ─────────────────────────────────────────────────

@pytest.mark.parametrize("raw,expected", [
    ("0", 0),
    ("42", 42),
    ("-17", -17),
    ("+8", 8),
    (" 12 ", 12),
    ("\t7\r\n", 7),
    ("2147483647", 2147483647),
    ("-2147483648", -2147483648),
])
def test_parse_int32_accepts(raw, expected):
    assert parse_int32(raw) == expected


@pytest.mark.parametrize("raw", [
    "abc", "1.5", "1_000", "0x10", "", " ", "12a", "٣",
    "2147483648", "-2147483649",
    "\u00a05", "5\u00a0", "\u20035", "\u30005",
])
def test_parse_int32_rejects(raw):
    assert parse_int32(raw) is None


# ─── decide_query_value ──────────────────────────────────────────

@pytest.mark.parametrize("value", [None, ""])
def test_decide_query_value_missing_is_400(value):
    outcome = decide_query_value(value)
    assert outcome.status_code == 400
    assert "required" in outcome.message


def test_decide_query_value_non_integer_is_400():
    outcome = decide_query_value("ten")
    assert outcome.status_code == 400
    assert "integer" in outcome.message


def test_decide_query_value_integer_is_200():
    assert decide_query_value("10").status_code == 200


# ─── decide_rate ─────────────────────────────────────────────────

def test_decide_rate_at_limit_is_accepted():
    outcome = decide_rate(RATE_LIMIT)
    assert outcome.status_code == 200
    assert outcome.body()["requests"] == RATE_LIMIT


def test_decide_rate_above_limit_is_429():
    outcome = decide_rate(RATE_LIMIT + 1)
    assert outcome.status_code == 429
    assert "requests" not in outcome.body()


def test_decide_rate_negative_count_is_accepted():
    assert decide_rate(-3).status_code == 200


def test_decide_rate_is_deterministic():
    assert decide_rate(3) == decide_rate(3)
