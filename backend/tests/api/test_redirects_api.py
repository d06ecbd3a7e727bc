"""Redirects — 301 vs 308 method preservation, end to end.

Invariants:
    - notHereAnymore/willRedirectToTarget point at the configured fixed location
    - After redirect301 httpx replays POST as GET → 405 at /redirecttest/target
    - After redirect308 httpx replays POST as POST → 200 at /redirecttest/target

Design Decisions:
    - httpx's redirect policy is the "client" under test: it downgrades POST
      on 301 and preserves it on 308, like browsers do
"""

from statuslab.config import get_settings


async def test_not_here_anymore_is_301_to_fixed_location(client):
    res = await client.get("/statuscodes/notHereAnymore")
    assert res.status_code == 301
    assert res.headers["location"] == get_settings().redirect_location


async def test_will_redirect_to_target_is_308_to_fixed_location(client):
    res = await client.get("/statuscodes/willRedirectToTarget")
    assert res.status_code == 308
    assert res.headers["location"] == get_settings().redirect_location


async def test_target_accepts_post(client):
    res = await client.post("/redirecttest/target")
    assert res.status_code == 200
    assert res.json()["message"] == "POST processed correctly at target endpoint."


async def test_target_rejects_get_with_405(client):
    res = await client.get("/redirecttest/target")
    assert res.status_code == 405
    assert res.json() == {"message": "Method Not Allowed"}
    assert "POST" in res.headers["allow"]


async def test_redirect301_points_at_target(client):
    res = await client.post("/redirecttest/redirect301")
    assert res.status_code == 301
    assert res.headers["location"] == "http://test/redirecttest/target"


async def test_redirect308_points_at_target(client):
    res = await client.post("/redirecttest/redirect308")
    assert res.status_code == 308
    assert res.headers["location"] == "http://test/redirecttest/target"


async def test_redirect301_followed_downgrades_to_get_and_fails(client):
    res = await client.post("/redirecttest/redirect301", follow_redirects=True)
    assert [r.status_code for r in res.history] == [301]
    assert res.request.method == "GET"
    assert res.status_code == 405


async def test_redirect308_followed_preserves_post(client):
    res = await client.post("/redirecttest/redirect308", follow_redirects=True)
    assert [r.status_code for r in res.history] == [308]
    assert res.request.method == "POST"
    assert res.status_code == 200
