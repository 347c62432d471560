"""convention-checkerのコマンドラインエントリポイント。"""

import argparse
import logging
import sys
from pathlib import Path

import yaml
from pydantic import ValidationError

from convention_checker.config import LOG_LEVELS, CheckerConfig
from convention_checker.logging_config import setup_logging
from convention_checker.manifest import load_manifest
from convention_checker.models.convention import FileRecord
from convention_checker.models.errors import ConventionCheckerError
from convention_checker.reporting.report import render_report
from convention_checker.services.checker import CheckerService
from convention_checker.validators.roles import parse_file_argument

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_VIOLATIONS = 1
EXIT_USAGE = 2


def _cmd_check(args: argparse.Namespace, config: CheckerConfig) -> int:
    records: list[FileRecord] = []
    if args.manifest:
        records.extend(load_manifest(Path(args.manifest)))
    records.extend(parse_file_argument(arg) for arg in args.files)
    if not records:
        print("error: no files given (pass role:path arguments or --manifest)", file=sys.stderr)
        return EXIT_USAGE

    service = CheckerService(config_dir=config.config_dir)
    summary = service.check_records(records)
    print(render_report(summary.violations, fmt=args.format or config.report_format))
    return EXIT_VIOLATIONS if summary.violations else EXIT_OK


def _cmd_rules(_: argparse.Namespace, config: CheckerConfig) -> int:
    service = CheckerService(config_dir=config.config_dir)
    print(yaml.dump(service.rule_table.to_dict(), allow_unicode=True, default_flow_style=False, sort_keys=False))
    return EXIT_OK


def _cmd_serve(args: argparse.Namespace, config: CheckerConfig) -> int:
    import uvicorn
    from starlette.middleware import Middleware

    from convention_checker.middleware import TokenAuthMiddleware
    from convention_checker.server import create_server

    mcp = create_server(config)
    app = mcp.http_app(
        transport="streamable-http",
        middleware=[Middleware(TokenAuthMiddleware, config=config)],
    )
    uvicorn.run(app, host=args.host or config.host, port=args.port or config.port)
    return EXIT_OK


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="convention-checker",
        description="Check an Xcode project's file layout against structural conventions.",
    )
    parser.add_argument("--config-dir", help="directory containing convention-rules/*.yaml")
    parser.add_argument("--log-level", type=str.upper, choices=LOG_LEVELS, help="log level (default: WARNING)")
    sub = parser.add_subparsers(dest="command", required=True)

    check = sub.add_parser("check", help="check files against the convention rules")
    check.add_argument("files", nargs="*", metavar="FILE", help="role:path, or a bare path to infer the role")
    check.add_argument("--manifest", help="YAML/JSON file with a 'files' list of {path, role}")
    check.add_argument("--format", choices=["text", "json"], help="report format")
    check.set_defaults(func=_cmd_check)

    rules = sub.add_parser("rules", help="print the loaded rule table")
    rules.set_defaults(func=_cmd_rules)

    serve = sub.add_parser("serve", help="run the MCP server over streamable HTTP")
    serve.add_argument("--host")
    serve.add_argument("--port", type=int)
    serve.set_defaults(func=_cmd_serve)

    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)

    overrides: dict[str, object] = {}
    if args.config_dir:
        overrides["config_dir"] = Path(args.config_dir)
    if args.log_level:
        overrides["log_level"] = args.log_level
    try:
        config = CheckerConfig(**overrides)  # type: ignore[arg-type]
    except ValidationError as e:
        print(f"error: invalid configuration: {e}", file=sys.stderr)
        return EXIT_USAGE
    setup_logging(config.log_level)

    try:
        return args.func(args, config)
    except ConventionCheckerError as e:
        logger.debug("Command failed", exc_info=True)
        print(f"error: {e}", file=sys.stderr)
        return EXIT_USAGE


if __name__ == "__main__":
    sys.exit(main())
