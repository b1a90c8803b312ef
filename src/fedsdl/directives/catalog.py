# Copyright 2026 FedSDL Contributors
# SPDX-License-Identifier: Apache-2.0

"""Registry of known federation directive definitions.

A catalog is built once, at process start, and is read-only afterwards.
It is the only source of the ``@link`` import list: which directives are
imported depends on the requested version, not on which ones a schema
happens to use.
"""

from __future__ import annotations

from collections.abc import Iterable

from graphql import DirectiveLocation
from pydantic import BaseModel, ConfigDict, field_validator
from pydantic import Field as _Field

from fedsdl.directives.version import VersionInput, VersionSpec
from fedsdl.errors import DuplicateDirectiveError, UnknownDirectiveError

# ###############
# Public Interface
# ###############


class DirectiveDefinition(BaseModel):
    """A directive the federation specification defines.

    Attributes:
        name: Directive name without the leading ``@``.
        min_version: First federation version that defines the directive.
        locations: Schema locations the directive may be applied at.
        repeatable: Whether one element may carry the directive more than once.
    """

    model_config = ConfigDict(frozen=True)

    name: str
    min_version: VersionSpec
    locations: frozenset[DirectiveLocation] = _Field(default_factory=frozenset)
    repeatable: bool = False

    @field_validator("min_version", mode="before")
    @classmethod
    def _parse_min_version(cls, value: VersionInput | VersionSpec) -> VersionSpec:
        return VersionSpec.parse(value)

    def allows(self, location: DirectiveLocation) -> bool:
        """Return True if the directive may be applied at *location*."""
        return location in self.locations


class DirectiveCatalog:
    """An ordered, name-indexed table of directive definitions."""

    def __init__(self, definitions: Iterable[DirectiveDefinition] = ()) -> None:
        self._definitions: dict[str, DirectiveDefinition] = {}
        for definition in definitions:
            self.register(definition)

    def register(self, definition: DirectiveDefinition) -> None:
        """Add *definition* to the catalog.

        Raises:
            DuplicateDirectiveError: If a directive with the same name is
                already registered.
        """
        if definition.name in self._definitions:
            raise DuplicateDirectiveError(f"Directive '@{definition.name}' is already registered")
        self._definitions[definition.name] = definition

    def lookup(self, name: str) -> DirectiveDefinition:
        """Return the definition registered under *name*.

        Raises:
            UnknownDirectiveError: If no such directive is registered.
        """
        try:
            return self._definitions[name]
        except KeyError:
            raise UnknownDirectiveError(name) from None

    def eligible_directives(self, version: VersionInput | VersionSpec) -> list[DirectiveDefinition]:
        """Return every directive available at *version*, by ascending minimum version.

        Definitions that share a minimum version keep their registration order.
        """
        version = VersionSpec.parse(version)
        eligible = [d for d in self._definitions.values() if d.min_version <= version]
        # sorted() is stable, which preserves registration order on ties.
        return sorted(eligible, key=lambda d: d.min_version)

    def extended(self, definitions: Iterable[DirectiveDefinition]) -> DirectiveCatalog:
        """Return a new catalog holding this catalog's definitions followed by *definitions*."""
        return DirectiveCatalog([*self._definitions.values(), *definitions])

    def __contains__(self, name: object) -> bool:
        return name in self._definitions

    def __iter__(self):
        return iter(self._definitions.values())

    def __len__(self) -> int:
        return len(self._definitions)


# Locations shared by @inaccessible and @tag.
VISIBILITY_LOCATIONS = frozenset(
    {
        DirectiveLocation.FIELD_DEFINITION,
        DirectiveLocation.OBJECT,
        DirectiveLocation.INTERFACE,
        DirectiveLocation.UNION,
        DirectiveLocation.ARGUMENT_DEFINITION,
        DirectiveLocation.SCALAR,
        DirectiveLocation.ENUM,
        DirectiveLocation.ENUM_VALUE,
        DirectiveLocation.INPUT_OBJECT,
        DirectiveLocation.INPUT_FIELD_DEFINITION,
    }
)

AUTHENTICATED_LOCATIONS = frozenset(
    {
        DirectiveLocation.FIELD_DEFINITION,
        DirectiveLocation.OBJECT,
        DirectiveLocation.INTERFACE,
        DirectiveLocation.SCALAR,
        DirectiveLocation.ENUM,
    }
)


def build_default_catalog() -> DirectiveCatalog:
    """Build a catalog holding the federation directives fedsdl knows about."""
    return DirectiveCatalog(
        [
            DirectiveDefinition(name="inaccessible", min_version="2.0", locations=VISIBILITY_LOCATIONS),
            DirectiveDefinition(name="tag", min_version="2.3", locations=VISIBILITY_LOCATIONS, repeatable=True),
            DirectiveDefinition(name="authenticated", min_version="2.5", locations=AUTHENTICATED_LOCATIONS),
        ]
    )


DEFAULT_CATALOG = build_default_catalog()
