# Copyright 2026 FedSDL Contributors
# SPDX-License-Identifier: Apache-2.0

"""Entry point for the fedsdl command-line interface."""

import argparse
import importlib
import sys
from pathlib import Path

from graphql import GraphQLSchema

from fedsdl.config.loader import CONFIG_FILE_NAME, FederationConfig, load_federation_config
from fedsdl.directives.catalog import DEFAULT_CATALOG
from fedsdl.directives.version import VersionSpec
from fedsdl.errors import FederationError
from fedsdl.printer.sdl import print_federation_sdl

# ###############
# Public Interface
# ###############


def main() -> None:
    """Run the fedsdl CLI."""
    parser = argparse.ArgumentParser(
        prog="fedsdl",
        description="fedsdl - print federated GraphQL schemas as SDL",
    )
    subparsers = parser.add_subparsers(dest="command", metavar="COMMAND")

    # print subcommand
    print_parser = subparsers.add_parser(
        "print",
        help="Print a schema as federation SDL",
        description="Import a schema object and print it as federation SDL.",
    )
    print_parser.add_argument(
        "schema",
        help="Schema location as MODULE:ATTRIBUTE, e.g. 'myapp.schema:schema'",
    )
    print_parser.add_argument(
        "--config",
        default=None,
        help=f"Configuration file (default: ./{CONFIG_FILE_NAME} if present)",
    )
    print_parser.add_argument(
        "--federation-version",
        default=None,
        help="Override the federation version declared by the schema or configuration",
    )
    print_parser.add_argument(
        "--output",
        "-o",
        default=None,
        help="Write the SDL to this file instead of stdout",
    )

    # directives subcommand
    directives_parser = subparsers.add_parser(
        "directives",
        help="List the directives imported at a federation version",
        description="Print the @link import list for a federation version, one directive per line.",
    )
    directives_parser.add_argument("version", help="Federation version, e.g. 2.3")
    directives_parser.add_argument(
        "--config",
        default=None,
        help=f"Configuration file (default: ./{CONFIG_FILE_NAME} if present)",
    )

    args = parser.parse_args()
    if args.command is None:
        parser.print_help()
        sys.exit(0)

    sys.exit(_dispatch(args))


# ################
# Implementation
# ################


def _dispatch(args: argparse.Namespace) -> int:
    """Dispatch to the appropriate subcommand handler."""
    if args.command == "print":
        return _cmd_print(args)
    if args.command == "directives":
        return _cmd_directives(args)
    return 0


def _load_config(config_arg: str | None) -> FederationConfig:
    """Load the explicit config file, or ``./federation.yaml`` when it exists."""
    if config_arg is not None:
        return load_federation_config(Path(config_arg))
    default_path = Path.cwd() / CONFIG_FILE_NAME
    if default_path.exists():
        return load_federation_config(default_path)
    return FederationConfig()


def _import_schema(location: str) -> GraphQLSchema:
    """Resolve ``MODULE:ATTRIBUTE`` to a schema object, calling the attribute if it is a factory."""
    module_name, sep, attribute = location.partition(":")
    if not sep or not module_name or not attribute:
        raise FederationError(f"Invalid schema location '{location}': expected MODULE:ATTRIBUTE")

    # Schemas are usually defined next to where the command is run.
    cwd = str(Path.cwd())
    if cwd not in sys.path:
        sys.path.insert(0, cwd)

    try:
        module = importlib.import_module(module_name)
    except ImportError as exc:
        raise FederationError(f"Cannot import module '{module_name}': {exc}") from exc
    except FederationError:
        raise
    except Exception as exc:
        raise FederationError(f"Error while importing module '{module_name}': {exc!r}") from exc

    try:
        schema = getattr(module, attribute)
    except AttributeError:
        raise FederationError(f"Module '{module_name}' has no attribute '{attribute}'") from None

    if not isinstance(schema, GraphQLSchema) and callable(schema):
        try:
            schema = schema()
        except FederationError:
            raise
        except Exception as exc:
            raise FederationError(f"Schema factory '{location}' failed: {exc!r}") from exc
    if not isinstance(schema, GraphQLSchema):
        raise FederationError(f"'{location}' is not a GraphQL schema")
    return schema


def _cmd_print(args: argparse.Namespace) -> int:
    """Handle the print subcommand."""
    try:
        config = _load_config(args.config)
        version = config.federation_version
        if args.federation_version is not None:
            version = VersionSpec.parse(args.federation_version)
        schema = _import_schema(args.schema)
        # Configured directives extend the schema's own catalog.
        base = getattr(schema, "directive_catalog", None)
        catalog = config.build_catalog(base if base is not None else DEFAULT_CATALOG)
        sdl = print_federation_sdl(schema, catalog=catalog, version=version)
    except FederationError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1

    if args.output is None:
        print(sdl)
        return 0

    output = Path(args.output)
    output.parent.mkdir(parents=True, exist_ok=True)
    output.write_text(sdl + "\n", encoding="utf-8")
    print(f"Wrote federation SDL to '{output}'.")
    return 0


def _cmd_directives(args: argparse.Namespace) -> int:
    """Handle the directives subcommand."""
    try:
        config = _load_config(args.config)
        catalog = config.build_catalog()
        version = VersionSpec.parse(args.version)
    except FederationError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1

    eligible = catalog.eligible_directives(version)
    if not eligible:
        print(f"No directives are imported at federation version {version}.")
        return 0
    for definition in eligible:
        print(f"@{definition.name}")
    return 0
