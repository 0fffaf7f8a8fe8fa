"""
Manage worker scripts and routes from the command line.

Examples:
    CF_API__TOKEN=... cfworkers upload --zone <zone_id> worker.js
    CF_ACCOUNT_ID=... cfworkers upload --script my-worker worker.js --inherit KV_OLD=KV
    cfworkers create-route --zone <zone_id> "example.com/*" --script my-worker
"""

from __future__ import annotations

import argparse
import json
import sys
from pathlib import Path
from typing import Any, Optional, Sequence

from pydantic import BaseModel

from cfworkers.core.config import Settings, get_settings
from cfworkers.core.container import WorkersAPI
from cfworkers.core.logging import setup_logging
from cfworkers.modules.bindings import WorkerBinding, WorkerInheritBinding, WorkerWasmModuleBinding
from cfworkers.modules.common.exceptions import WorkersError
from cfworkers.modules.routes import WorkerRoute
from cfworkers.modules.scripts import WorkerRequestParams, WorkerScriptParams


def parse_inherit(value: str) -> tuple[str, WorkerInheritBinding]:
    name, _, old_name = value.partition("=")
    if not name:
        raise argparse.ArgumentTypeError(f"invalid inherit binding: {value!r}")
    return name, WorkerInheritBinding(old_name=old_name)


def parse_wasm(value: str) -> tuple[str, WorkerWasmModuleBinding]:
    name, sep, path = value.partition("=")
    if not name or not sep:
        raise argparse.ArgumentTypeError(f"expected NAME=PATH, got {value!r}")
    module_path = Path(path)
    if not module_path.exists():
        raise argparse.ArgumentTypeError(f"wasm module not found: {module_path}")
    return name, WorkerWasmModuleBinding(module=module_path.read_bytes())


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="cfworkers", description="Manage worker scripts and routes")
    parser.add_argument("--account", default=None, help="Account ID, enables multi-script endpoints")
    parser.add_argument("--log-level", default=None, help="Logging level (default from CF_LOG_LEVEL)")
    sub = parser.add_subparsers(dest="command", required=True)

    def add_target(p: argparse.ArgumentParser) -> None:
        p.add_argument("--zone", default="", help="Zone ID (single-script endpoints)")
        p.add_argument("--script", default="", help="Script name (multi-script endpoints)")

    upload = sub.add_parser("upload", help="Upload a worker script")
    add_target(upload)
    upload.add_argument("path", type=Path, help="JavaScript source file")
    upload.add_argument(
        "--inherit",
        action="append",
        type=parse_inherit,
        default=[],
        metavar="NAME[=OLD]",
        help="Keep a binding from the previous deployment",
    )
    upload.add_argument(
        "--wasm",
        action="append",
        type=parse_wasm,
        default=[],
        metavar="NAME=PATH",
        help="Attach a WebAssembly module binding",
    )

    download = sub.add_parser("download", help="Print a worker script")
    add_target(download)

    delete = sub.add_parser("delete", help="Delete a worker script")
    add_target(delete)

    sub.add_parser("list-scripts", help="List scripts of the account")

    list_routes = sub.add_parser("list-routes", help="List routes of a zone")
    list_routes.add_argument("--zone", required=True)

    create_route = sub.add_parser("create-route", help="Create a route")
    create_route.add_argument("--zone", required=True)
    create_route.add_argument("pattern")
    create_route.add_argument("--script", default="", help="Script name (multi-script routes)")
    create_route.add_argument("--disabled", action="store_true", help="Create the filter disabled")

    delete_route = sub.add_parser("delete-route", help="Delete a route")
    delete_route.add_argument("--zone", required=True)
    delete_route.add_argument("route_id")

    return parser


def run(args: argparse.Namespace, api: WorkersAPI) -> Any:
    if args.command == "upload":
        params = WorkerRequestParams(zone_id=args.zone, script_name=args.script)
        if not args.path.exists():
            raise SystemExit(f"script not found: {args.path}")
        script = args.path.read_text(encoding="utf-8")
        bindings: dict[str, WorkerBinding] = dict(args.inherit)
        bindings.update(dict(args.wasm))
        print(f"[api] uploading {args.path}")
        if bindings:
            return api.scripts.upload_worker_with_bindings(params, WorkerScriptParams(script, bindings))
        return api.scripts.upload_worker(params, script)
    if args.command == "download":
        params = WorkerRequestParams(zone_id=args.zone, script_name=args.script)
        return api.scripts.download_worker(params).result.script
    if args.command == "delete":
        params = WorkerRequestParams(zone_id=args.zone, script_name=args.script)
        return api.scripts.delete_worker(params)
    if args.command == "list-scripts":
        return api.scripts.list_worker_scripts()
    if args.command == "list-routes":
        return api.routes.list_worker_routes(args.zone)
    if args.command == "create-route":
        route = WorkerRoute(pattern=args.pattern, enabled=not args.disabled, script=args.script or None)
        return api.routes.create_worker_route(args.zone, route)
    if args.command == "delete-route":
        return api.routes.delete_worker_route(args.zone, args.route_id)
    raise SystemExit(f"unknown command: {args.command}")


def render(result: Any) -> str:
    if isinstance(result, BaseModel):
        return json.dumps(result.model_dump(mode="json"), ensure_ascii=False, indent=2)
    return str(result)


def main(argv: Optional[Sequence[str]] = None, api: Optional[WorkersAPI] = None) -> None:
    args = build_parser().parse_args(argv)
    settings: Settings = get_settings()
    setup_logging(args.log_level or settings.log_level)

    if api is None:
        if args.account is not None:
            settings = settings.model_copy(update={"account_id": args.account})
        api = WorkersAPI.from_settings(settings)

    try:
        result = run(args, api)
    except WorkersError as exc:
        raise SystemExit(f"{args.command} failed: {exc}")
    print(render(result))


if __name__ == "__main__":
    try:
        main()
    except KeyboardInterrupt:
        sys.exit("aborted by user")
