"""
Jira Assets provider command line.

Usage:
    jiraassets-provider schema              # Print all schemas as JSON
    jiraassets-provider check               # Validate configuration from .env / environment
    jiraassets-provider check --config provider.yaml --schema-id 1
"""

import argparse
import json
import logging
import os
import sys
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv
from rich.console import Console
from rich.table import Table

from . import __version__
from .framework import (
    ComponentConfigureRequest,
    ComponentConfigureResponse,
    ConfigureRequest,
    ConfigureResponse,
    DataSourceReadRequest,
    DataSourceReadResponse,
    Diagnostics,
)
from .provider import JiraAssetsProvider
from .utils import load_provider_config, setup_structured_logging

console = Console()
logger = logging.getLogger(__name__)


def provider_schemas(provider: JiraAssetsProvider) -> dict:
    """Schemas of the provider and every type it serves, keyed by type name."""
    resources = {}
    for factory in provider.resources():
        resource = factory()
        resources[resource.type_name(provider.type_name)] = resource.schema().to_dict()

    data_sources = {}
    for factory in provider.data_sources():
        data_source = factory()
        data_sources[data_source.type_name(provider.type_name)] = data_source.schema().to_dict()

    return {
        "provider": provider.schema().to_dict(),
        "version": provider.version,
        "resource_schemas": resources,
        "data_source_schemas": data_sources,
    }


def print_diagnostics(diagnostics: Diagnostics) -> None:
    """Render diagnostics as a table."""
    table = Table(title="Diagnostics")
    table.add_column("Severity")
    table.add_column("Attribute")
    table.add_column("Summary")
    table.add_column("Detail")

    for diag in diagnostics:
        color = "red" if diag.severity.value == "error" else "yellow"
        table.add_row(
            f"[{color}]{diag.severity.value}[/{color}]",
            diag.attribute or "",
            diag.summary,
            diag.detail,
        )

    console.print(table)


def cmd_schema(args: argparse.Namespace) -> int:
    provider = JiraAssetsProvider(version=__version__)
    print(json.dumps(provider_schemas(provider), indent=2 if args.pretty else None))
    return 0


def cmd_check(args: argparse.Namespace) -> int:
    if args.env_file:
        env_file = Path(args.env_file)
        if not env_file.exists():
            console.print(f"[red]Error: env file not found: {env_file}[/red]")
            return 1
        load_dotenv(env_file)
    else:
        load_dotenv()

    config: dict = {}
    if args.config:
        config = load_provider_config(args.config).model_dump(exclude_none=True)

    provider = JiraAssetsProvider(version=__version__)
    resp = ConfigureResponse()
    provider.configure(ConfigureRequest(config=config), resp)

    if resp.diagnostics.has_error():
        print_diagnostics(resp.diagnostics)
        return 1

    console.print(f"[green]Configuration OK[/green] (workspace {resp.data_source_data.workspace_id})")

    if args.schema_id is None:
        return 0

    data_source = provider.data_sources()[0]()
    configure_resp = ComponentConfigureResponse()
    data_source.configure(ComponentConfigureRequest(provider_data=resp.data_source_data), configure_resp)
    if configure_resp.diagnostics.has_error():
        print_diagnostics(configure_resp.diagnostics)
        return 1

    read_resp = DataSourceReadResponse()
    data_source.read(DataSourceReadRequest(config={"id": args.schema_id}), read_resp)
    if read_resp.diagnostics.has_error():
        print_diagnostics(read_resp.diagnostics)
        return 1

    table = Table(title=f"Object schema {args.schema_id}")
    table.add_column("Attribute")
    table.add_column("Value")
    for key, value in read_resp.state.items():
        table.add_row(key, "" if value is None else str(value))
    console.print(table)
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="jiraassets-provider",
        description="Jira Assets Terraform provider utilities",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument("--json-logs", action="store_true", help="Emit JSON-structured logs")
    subparsers = parser.add_subparsers(dest="command", required=True)

    schema_parser = subparsers.add_parser("schema", help="Print provider, resource and data source schemas")
    schema_parser.add_argument("--pretty", action="store_true", help="Indent JSON output")
    schema_parser.set_defaults(func=cmd_schema)

    check_parser = subparsers.add_parser("check", help="Resolve configuration and optionally read a schema")
    check_parser.add_argument("--config", help="YAML file with workspace_id, user, password")
    check_parser.add_argument("--env-file", help="Path to .env file (default: search from cwd)")
    check_parser.add_argument("--schema-id", help="Object schema id to fetch as a connectivity check")
    check_parser.set_defaults(func=cmd_check)

    return parser


def main(argv: Optional[list[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    setup_structured_logging(os.getenv("TF_LOG", "WARNING"), json_output=args.json_logs)

    return args.func(args)


if __name__ == "__main__":
    sys.exit(main())
