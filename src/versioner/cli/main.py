from __future__ import annotations

import argparse
import importlib
import sys

from .. import __version__
from ..core.context import RunContext
from ..core.errors import INTERNAL_ERROR, ScriptError
from ..core.exit_codes import ERR_INTERNAL, ERR_USAGE
from ..core.logging import log_event
from .output import render_error, resolve_output_format

PROG = "versioner"

CONFIGURE_HOOKS = (
    ("versioner.copyto.command", "configure_copyto_parser"),
    ("versioner.bump.command", "configure_bump_parsers"),
    ("versioner.tsfile.command", "configure_create_ts_parser"),
)

COMMAND_RUNNERS = {
    "copyto": ("versioner.copyto.command", "run_copyto_command"),
    "major": ("versioner.bump.command", "run_bump_command"),
    "minor": ("versioner.bump.command", "run_bump_command"),
    "patch": ("versioner.bump.command", "run_bump_command"),
    "create-ts": ("versioner.tsfile.command", "run_create_ts_command"),
}


def _import_attr(module_name: str, attr: str):
    return getattr(importlib.import_module(module_name), attr)


def _project_options(defaults: bool) -> argparse.ArgumentParser:
    # Shared by the root parser and every subcommand so the options work on
    # either side of the subcommand name; subcommands only set what was given.
    p = argparse.ArgumentParser(add_help=False)
    p.add_argument(
        "--package",
        metavar="PATH",
        default=None if defaults else argparse.SUPPRESS,
        help="path to package.json file (default: current directory)",
    )
    p.add_argument(
        "--type",
        default="node" if defaults else argparse.SUPPRESS,
        help="type of project (default: node)",
    )
    p.add_argument(
        "--json",
        action="store_true",
        default=False if defaults else argparse.SUPPRESS,
        help="emit JSON output",
    )
    return p


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog=PROG,
        description="A utility to help with versioning projects",
        parents=[_project_options(defaults=True)],
    )
    p.add_argument("--version", action="version", version=f"{PROG} {__version__}")
    p.add_argument("--format", choices=["text", "json"], default=None, help="output format")
    p.add_argument("--run-id", help="run identifier for log events")
    p.add_argument("--cwd", help="run command from an explicit project directory")
    p.add_argument("--log-json", action="store_true", help="emit log events as JSON lines")
    vg = p.add_mutually_exclusive_group()
    vg.add_argument("--verbose", action="store_true", help="emit log events on stderr")
    vg.add_argument("--quiet", action="store_true", help="only emit errors")
    sub = p.add_subparsers(dest="cmd")
    parents = [_project_options(defaults=False)]
    for module_name, attr in CONFIGURE_HOOKS:
        _import_attr(module_name, attr)(sub, parents)
    return p


def main(argv: list[str] | None = None) -> int:
    raw_argv = argv if argv is not None else sys.argv[1:]
    p = build_parser()
    ns = p.parse_args(raw_argv)
    if ns.cmd is None:
        p.print_help()
        return 0
    if ns.format and ns.json and ns.format != "json":
        message = "conflicting output flags: use either --format json or --json"
        print(render_error(as_json=False, message=message, code=ERR_USAGE, kind="usage_error"), file=sys.stderr)
        return ERR_USAGE
    fmt = resolve_output_format(cli_json=ns.json, cli_format=ns.format)
    ctx = RunContext.from_args(
        ns.run_id,
        ns.cwd,
        fmt,
        ns.verbose,
        ns.quiet,
        ns.log_json,
    )
    try:
        log_event(ctx, "info", "cli", "start", cmd=ns.cmd, fmt=ctx.output_format)
        module_name, attr = COMMAND_RUNNERS[ns.cmd]
        return _import_attr(module_name, attr)(ctx, ns)
    except ScriptError as exc:
        print(render_error(as_json=ctx.as_json, message=str(exc), code=exc.code, kind=exc.kind), file=sys.stderr)
        return exc.code
    except Exception as exc:  # pragma: no cover
        print(
            render_error(as_json=ctx.as_json, message=f"internal error: {exc}", code=ERR_INTERNAL, kind=INTERNAL_ERROR),
            file=sys.stderr,
        )
        return ERR_INTERNAL


if __name__ == "__main__":
    raise SystemExit(main())
