# Copyright 2026 FedSDL Contributors
# SPDX-License-Identifier: Apache-2.0

"""Data model and YAML parser for the fedsdl configuration file."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

import yaml
from graphql import DirectiveLocation

from fedsdl.directives.catalog import DEFAULT_CATALOG, DirectiveCatalog, DirectiveDefinition
from fedsdl.directives.version import VersionSpec
from fedsdl.errors import DuplicateDirectiveError, FederationConfigError, InvalidVersionError

# ###############
# Public Interface
# ###############

CONFIG_FILE_NAME = "federation.yaml"


@dataclass
class FederationConfig:
    """The parsed fedsdl configuration.

    Attributes:
        federation_version: Version applied to printed schemas, or None to keep
            whatever the schema declares.
        directives: Directive definitions added on top of the default catalog.
    """

    federation_version: VersionSpec | None = None
    directives: list[DirectiveDefinition] = field(default_factory=list)

    def build_catalog(self, base: DirectiveCatalog = DEFAULT_CATALOG) -> DirectiveCatalog:
        """Return *base* extended with the configured directives.

        Raises:
            FederationConfigError: If a configured directive is already in *base*.
        """
        try:
            return base.extended(self.directives)
        except DuplicateDirectiveError as exc:
            raise FederationConfigError(str(exc)) from exc


def load_federation_config(path: Path) -> FederationConfig:
    """Load and parse a fedsdl configuration file.

    Args:
        path: Path to the ``federation.yaml`` file.

    Returns:
        A FederationConfig instance populated from the file.

    Raises:
        FederationConfigError: If the file cannot be read or the configuration is invalid.
    """
    try:
        text = path.read_text(encoding="utf-8")
    except FileNotFoundError:
        raise FederationConfigError(f"Federation config file not found: {path}") from None
    except OSError as exc:
        raise FederationConfigError(f"Cannot read federation config file: {exc}") from exc

    return parse_federation_config(text, source_label=str(path))


def parse_federation_config(text: str, source_label: str = "<string>") -> FederationConfig:
    """Parse configuration YAML text into a FederationConfig.

    An empty document yields the default configuration.

    Raises:
        FederationConfigError: If the YAML is invalid or a field is malformed.
    """
    try:
        data = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise FederationConfigError(f"Invalid YAML in {source_label}: {exc}") from exc

    if data is None:
        return FederationConfig()
    if not isinstance(data, dict):
        raise FederationConfigError(f"{source_label}: federation config must be a YAML mapping")

    version = None
    if "federation-version" in data:
        version = _parse_version(data["federation-version"], "federation-version", source_label)

    directives: list[DirectiveDefinition] = []
    if "directives" in data:
        raw_directives = data["directives"]
        if not isinstance(raw_directives, list):
            raise FederationConfigError(f"{source_label}: 'directives' must be a list")
        for index, entry in enumerate(raw_directives):
            directives.append(_parse_directive(entry, index, source_label))

    return FederationConfig(federation_version=version, directives=directives)


# ################
# Implementation
# ################


def _parse_version(value: object, key: str, location: str) -> VersionSpec:
    # YAML reads 2.3 as a float and "2.3" as a string; both are accepted.
    if not isinstance(value, (int, float, str)) or isinstance(value, bool):
        raise FederationConfigError(f"{location}: '{key}' must be a version number or string")
    try:
        return VersionSpec.parse(value)
    except InvalidVersionError as exc:
        raise FederationConfigError(f"{location}: '{key}': {exc}") from exc


def _require_string(mapping: dict[str, object], key: str, location: str) -> str:
    """Extract a required string field from a mapping, raising FederationConfigError if missing."""
    if key not in mapping:
        raise FederationConfigError(f"{location}: missing required field '{key}'")
    value = mapping[key]
    if not isinstance(value, str):
        raise FederationConfigError(f"{location}: '{key}' must be a string")
    return value


def _parse_directive(entry: object, index: int, source_label: str) -> DirectiveDefinition:
    """Parse a single directive definition entry from the YAML list."""
    location = f"{source_label}: directives[{index}]"

    if not isinstance(entry, dict):
        raise FederationConfigError(f"{location} must be a YAML mapping")

    name = _require_string(entry, "name", location)
    if name.startswith("@"):
        name = name[1:]

    if "min-version" not in entry:
        raise FederationConfigError(f"{location} '{name}': missing required field 'min-version'")
    min_version = _parse_version(entry["min-version"], "min-version", f"{location} '{name}'")

    raw_locations = entry.get("locations", [])
    if not isinstance(raw_locations, list) or not all(isinstance(loc, str) for loc in raw_locations):
        raise FederationConfigError(f"{location} '{name}': 'locations' must be a list of strings")
    locations = set()
    for raw in raw_locations:
        try:
            locations.add(DirectiveLocation[raw.upper()])
        except KeyError:
            raise FederationConfigError(f"{location} '{name}': unknown directive location '{raw}'") from None

    repeatable = entry.get("repeatable", False)
    if not isinstance(repeatable, bool):
        raise FederationConfigError(f"{location} '{name}': 'repeatable' must be a boolean")

    return DirectiveDefinition(
        name=name,
        min_version=min_version,
        locations=frozenset(locations),
        repeatable=repeatable,
    )
