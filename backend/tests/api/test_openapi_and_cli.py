"""API Documentation & CLI — generated OpenAPI and the statuslab command.

Invariants:
    - Every route documents the status codes it can emit
    - `statuslab openapi <path>` writes the same document the app serves
"""

import json

import pytest

from statuslab.cli import export_openapi, main


@pytest.mark.parametrize("path,method,codes", [
    ("/statuscodes/forbidden", "get", {"200", "401", "403"}),
    ("/statuscodes/validate-content", "post", {"201", "400", "415"}),
    ("/statuscodes/delete/{resource_id}", "delete", {"204"}),
    ("/statuscodes/notHereAnymore", "get", {"301"}),
    ("/redirecttest/redirect308", "post", {"308"}),
    ("/redirecttest/target", "post", {"200", "405"}),
])
async def test_openapi_documents_status_codes(client, path, method, codes):
    res = await client.get("/openapi.json")
    assert res.status_code == 200
    documented = set(res.json()["paths"][path][method]["responses"])
    assert codes <= documented


async def test_health_returns_ok(client):
    res = await client.get("/health/")
    assert res.status_code == 200
    assert res.json()["status"] == "healthy"


def test_export_openapi_writes_file(tmp_path):
    target = tmp_path / "openapi.json"
    document = export_openapi(str(target))
    written = json.loads(target.read_text(encoding="utf-8"))
    assert written == document
    assert "/statuscodes/ok" in written["paths"]


def test_cli_openapi_command(tmp_path):
    target = tmp_path / "spec.json"
    main(["openapi", str(target)])
    assert "/redirecttest/target" in json.loads(target.read_text(encoding="utf-8"))["paths"]


def test_cli_without_command_exits_nonzero(capsys):
    with pytest.raises(SystemExit) as exc:
        main([])
    assert exc.value.code == 1
