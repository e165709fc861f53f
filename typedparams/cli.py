"""
CLI entry point for typedparams.

Usage:
    # Serve the application (health endpoint plus error handlers)
    python -m typedparams.cli serve --port 8000

    # Try a built-in parameter type against a raw value
    python -m typedparams.cli check int abc --name id
"""

import argparse
import json
import logging
import sys
from typing import Optional, Sequence

from typedparams.domain.params.builtin import BUILTIN_PARAM_TYPES
from typedparams.domain.params.entities import Rejected
from typedparams.domain.params.param_type import DEFAULT_PARAMETER_NAME, bind

logger = logging.getLogger(__name__)


def cmd_serve(args: argparse.Namespace) -> int:
    """Start the FastAPI application with uvicorn."""
    import uvicorn

    logger.info("Starting application at http://%s:%d", args.host, args.port)
    uvicorn.run("typedparams.main:app", host=args.host, port=args.port, reload=False)
    return 0


def cmd_check(args: argparse.Namespace) -> int:
    """Bind a raw value and print the value or the error body as JSON."""
    result = bind(BUILTIN_PARAM_TYPES[args.type], args.value, args.name, logger)
    if isinstance(result, Rejected):
        print(json.dumps(result.error.body.to_dict()))
        return 1
    print(json.dumps({"value": str(result.parameter)}))
    return 0


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = argparse.ArgumentParser(description="typedparams CLI")
    subparsers = parser.add_subparsers(dest="command", required=True)

    # Serve
    serve_parser = subparsers.add_parser("serve", help="Run the API server")
    serve_parser.add_argument("--host", default="127.0.0.1", help="Bind address")
    serve_parser.add_argument("--port", type=int, default=8000, help="Port (default 8000)")
    serve_parser.set_defaults(func=cmd_serve)

    # Check
    check_parser = subparsers.add_parser(
        "check", help="Parse a raw value with a built-in parameter type"
    )
    check_parser.add_argument("type", choices=sorted(BUILTIN_PARAM_TYPES), help="Parameter type")
    check_parser.add_argument("value", help="Raw input text")
    check_parser.add_argument(
        "--name", default=DEFAULT_PARAMETER_NAME,
        help="Parameter name used in the error message",
    )
    check_parser.set_defaults(func=cmd_check)

    args = parser.parse_args(argv)
    return args.func(args)


if __name__ == "__main__":
    sys.exit(main())
