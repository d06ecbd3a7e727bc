"""StatusLab CLI — run the server or write the OpenAPI document.

Entry point registered as ``statuslab`` in ``pyproject.toml``::

    [project.scripts]
    statuslab = "statuslab.cli:main"
"""

import argparse
import json
import sys
from pathlib import Path


def main(argv: list[str] | None = None) -> None:
    """CLI entry point for the ``statuslab`` command."""
    parser = argparse.ArgumentParser(
        prog="statuslab",
        description="StatusLab - HTTP status-code demonstration API.",
    )
    subparsers = parser.add_subparsers(dest="command")

    # -- statuslab serve ----------------------------------------------------
    serve_parser = subparsers.add_parser("serve", help="Start the API server")
    serve_parser.add_argument("--host", default=None, help="Bind host address")
    serve_parser.add_argument("--port", type=int, default=None, help="Bind port number")
    serve_parser.add_argument(
        "--reload", action="store_true", help="Reload on source changes",
    )

    # -- statuslab openapi --------------------------------------------------
    openapi_parser = subparsers.add_parser(
        "openapi", help="Write the OpenAPI document as JSON",
    )
    openapi_parser.add_argument(
        "output", nargs="?", default="-",
        help="Output file path ('-' for stdout)",
    )

    args = parser.parse_args(argv)

    if args.command == "serve":
        _serve(args)
    elif args.command == "openapi":
        export_openapi(args.output)
    else:
        parser.print_help()
        sys.exit(1)


def _serve(args: argparse.Namespace) -> None:
    import uvicorn

    from statuslab.config import get_settings

    settings = get_settings()
    uvicorn.run(
        "statuslab.main:app",
        host=args.host or settings.host,
        port=args.port or settings.port,
        reload=args.reload,
        log_config=None,
    )


def export_openapi(output: str) -> dict:
    """Render the app's OpenAPI schema to a file, or stdout for '-'."""
    from statuslab.main import app

    document = app.openapi()
    text = json.dumps(document, indent=2, ensure_ascii=False)
    if output == "-":
        sys.stdout.write(text + "\n")
    else:
        Path(output).write_text(text + "\n", encoding="utf-8")
    return document
