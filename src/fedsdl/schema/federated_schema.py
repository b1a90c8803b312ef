# Copyright 2026 FedSDL Contributors
# SPDX-License-Identifier: Apache-2.0

"""A graphql-core schema that knows which federation version it targets."""

from __future__ import annotations

from typing import Any

from graphql import GraphQLNamedType, GraphQLSchema

from fedsdl.directives.catalog import DEFAULT_CATALOG, DirectiveCatalog
from fedsdl.directives.version import VersionInput, VersionSpec
from fedsdl.schema.context import SchemaFederationContext
from fedsdl.schema.traversal import iter_schema_elements, resolve_type

# ###############
# Public Interface
# ###############


class FederatedSchema(GraphQLSchema):
    """A ``GraphQLSchema`` carrying a :class:`SchemaFederationContext`.

    Accepts every ``GraphQLSchema`` argument plus:

    Args:
        federation_version: Version to target; ``1.0`` when omitted.
        catalog: Directive catalog used when printing; the default catalog
            when omitted.

    Building the schema freezes the directive sets of all its elements.
    """

    def __init__(
        self,
        *args: Any,
        federation_version: VersionInput | VersionSpec | None = None,
        catalog: DirectiveCatalog | None = None,
        **kwargs: Any,
    ) -> None:
        # Parse before building so an invalid version fails at definition time.
        self.federation_context = SchemaFederationContext(federation_version)
        self.directive_catalog = catalog if catalog is not None else DEFAULT_CATALOG
        super().__init__(*args, **kwargs)
        for element in iter_schema_elements(self):
            directives = getattr(element, "federation_directives", None)
            if directives is not None:
                directives.freeze()

    def federation(self, version: VersionInput | VersionSpec) -> None:
        """Select the federation version. A later call replaces an earlier one."""
        self.federation_context.set_version(version)

    @property
    def federation_version(self) -> str:
        """The selected version as written, e.g. ``"2.3"``; ``"1.0"`` by default."""
        return str(self.federation_context.version())

    @property
    def is_federation_2(self) -> bool:
        return self.federation_context.is_federation_2()

    def get_federated_type(self, name: str) -> GraphQLNamedType:
        """Return the type called *name*, raising ``UnresolvedTypeError`` if absent."""
        return resolve_type(self, name)

    def federation_sdl(self, catalog: DirectiveCatalog | None = None) -> str:
        """Print this schema as federation SDL."""
        from fedsdl.printer.sdl import print_federation_sdl

        return print_federation_sdl(self, catalog=catalog)
