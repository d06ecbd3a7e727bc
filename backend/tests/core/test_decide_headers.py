"""Header Decisions — tests for authorization, negotiation and media-type predicates.

Tests cover:
    - decide_authorization_present: 401 only when the header is absent
    - decide_token: 401 missing, 403 wrong, 200 exact VALID_TOKEN
    - decide_negotiation: substring match on application/json
    - decide_validated_content: 415 before 400 before 201
"""

import pytest

from statuslab.core.decide_headers import (
    decide_authorization_present,
    decide_negotiation,
    decide_token,
    decide_validated_content,
    is_json_media_type,
)


# ─── decide_authorization_present ────────────────────────────────

def test_authorization_missing_is_401():
    outcome = decide_authorization_present(None)
    assert outcome.status_code == 401
    assert "Missing Authorization" in outcome.message


@pytest.mark.parametrize("value", ["", "Basic abc", "Bearer anything"])
def test_authorization_any_value_is_200(value):
    assert decide_authorization_present(value).status_code == 200


# ─── decide_token ────────────────────────────────────────────────

def test_token_missing_is_401_not_403():
    assert decide_token(None).status_code == 401


def test_token_exact_match_is_200():
    outcome = decide_token("Bearer VALID_TOKEN")
    assert outcome.status_code == 200
    assert outcome.message == "Valid token provided."


@pytest.mark.parametrize("value", [
    "",
    "bearer VALID_TOKEN",
    "Bearer valid_token",
    "Bearer VALID_TOKEN ",
    " Bearer VALID_TOKEN",
    "VALID_TOKEN",
    "Bearer  VALID_TOKEN",
])
def test_token_any_other_value_is_403(value):
    assert decide_token(value).status_code == 403


# ─── decide_negotiation ──────────────────────────────────────────

@pytest.mark.parametrize("accept", [
    "application/json",
    "text/html, application/json;q=0.9",
    "application/json; charset=utf-8",
])
def test_negotiation_json_substring_is_200(accept):
    assert decide_negotiation(accept).status_code == 200


@pytest.mark.parametrize("accept", [None, "", "*/*", "text/html", "APPLICATION/JSON"])
def test_negotiation_without_json_is_406(accept):
    assert decide_negotiation(accept).status_code == 406


# ─── is_json_media_type / decide_validated_content ───────────────

@pytest.mark.parametrize("content_type,expected", [
    ("application/json", True),
    ("Application/JSON", True),
    ("application/json; charset=utf-8", False),
    ("text/plain", False),
    (None, False),
])
def test_is_json_media_type(content_type, expected):
    assert is_json_media_type(content_type) is expected


def test_validated_content_wrong_type_is_415_even_with_name():
    assert decide_validated_content("text/plain", "Widget").status_code == 415


@pytest.mark.parametrize("name", [None, ""])
def test_validated_content_json_without_name_is_400(name):
    assert decide_validated_content("application/json", name).status_code == 400


def test_validated_content_json_with_name_is_201():
    outcome = decide_validated_content("application/json", "Widget")
    assert outcome.status_code == 201
    assert outcome.created_id == 1
    assert outcome.body()["resource"] == {"name": "Widget"}
