#!/usr/bin/env python3
"""
Bellingcat toolkit catalog - command line

Usage:
    python -m bellingcat_toolkit list --search whois
    python -m bellingcat_toolkit list --category "Network Intelligence"
    python -m bellingcat_toolkit categories
    python -m bellingcat_toolkit show Shodan
    python -m bellingcat_toolkit export all --output-dir ./exports
"""

import argparse
import asyncio
import sys
from typing import List, Optional

from bellingcat_toolkit.catalog.categories import ALL_CATEGORIES, category_counts
from bellingcat_toolkit.catalog.loader import CatalogLoader
from bellingcat_toolkit.config.toolkit_config import get_config
from bellingcat_toolkit.session import ToolkitSession
from bellingcat_toolkit.utils.error_handler import ExportError
from bellingcat_toolkit.utils.logger import quiet_third_party_loggers, setup_logger


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="bellingcat-toolkit",
        description="Search, inspect and export the Bellingcat investigative tools catalog",
    )
    parser.add_argument("--url", help="Override the remote tool list URL")
    parser.add_argument("--timeout", type=float, help="Seconds to wait for the tool list")
    parser.add_argument("--log-level", help="Logging level (default: LOG_LEVEL or INFO)")

    subparsers = parser.add_subparsers(dest="command", required=True)

    def add_filters(sub):
        sub.add_argument("--search", "-s", default="", help="Case-insensitive text in name or description")
        sub.add_argument("--category", "-c", default=ALL_CATEGORIES, help='Exact category, or "all"')

    list_parser = subparsers.add_parser("list", help="List tools in the filtered view")
    add_filters(list_parser)

    subparsers.add_parser("categories", help="List discovered categories")

    show_parser = subparsers.add_parser("show", help="Show details for one tool")
    show_parser.add_argument("name", help="Tool name (case-insensitive)")

    export_parser = subparsers.add_parser("export", help="Export the filtered view")
    export_parser.add_argument("format", choices=["xlsx", "pdf", "all"])
    export_parser.add_argument("--output-dir", "-o", help="Directory for export files")
    add_filters(export_parser)

    return parser


def _print_tools(session: ToolkitSession):
    tools = session.filtered
    for tool in tools:
        category = f" [{tool.category}]" if tool.category else ""
        print(f"- {tool.name}{category}")
        if tool.description:
            print(f"    {tool.description}")
        if tool.has_link:
            print(f"    Visit: {tool.url}")
    print(f"\n{len(tools)} of {len(session.state.tools)} tools")


def _print_detail(session: ToolkitSession, name: str) -> int:
    tool = session.find(name)
    if tool is None:
        print(f"No tool named {name!r}", file=sys.stderr)
        return 1

    detail = session.select(tool)
    print(detail.name)
    print(f"Description: {detail.description or ''}")
    print(f"Category: {detail.category or ''}")
    if detail.url:
        print(f"Link: {detail.url}")
    return 0


def _export(session: ToolkitSession, export_format: str) -> int:
    actions = []
    if export_format in ("xlsx", "all"):
        actions.append(session.export_spreadsheet)
    if export_format in ("pdf", "all"):
        actions.append(session.export_document)

    exit_code = 0
    for action in actions:
        try:
            path = action()
            print(f"✅ Saved {path}")
        except ExportError as e:
            print(f"❌ {e.format_name} export failed: {session.state.notices.get(e.format_name, e.reason)}", file=sys.stderr)
            exit_code = 1
    return exit_code


async def run(args: argparse.Namespace) -> int:
    config = get_config()
    loader = CatalogLoader(
        tools_url=args.url or config.tools_url,
        timeout=args.timeout if args.timeout is not None else config.fetch_timeout,
    )
    session = ToolkitSession(loader=loader, output_dir=getattr(args, "output_dir", None))
    await session.start()

    if session.state.is_unavailable:
        print(f"⚠️  Catalog unavailable: {session.state.status_message}", file=sys.stderr)
        return 1

    if args.command == "categories":
        for category, count in category_counts(session.state.tools).items():
            print(f"{category} ({count})")
        return 0

    if args.command == "show":
        return _print_detail(session, args.name)

    session.set_category(args.category)
    session.set_search(args.search)

    if args.command == "list":
        _print_tools(session)
        return 0

    return _export(session, args.format)


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    config = get_config()
    setup_logger(name="bellingcat_toolkit", level=args.log_level or config.log_level)
    quiet_third_party_loggers()

    try:
        return asyncio.run(run(args))
    except KeyboardInterrupt:
        print("\n⚠️  Interrupted by user", file=sys.stderr)
        return 1


if __name__ == '__main__':
    sys.exit(main())
