# Copyright 2026 FedSDL Contributors
# SPDX-License-Identifier: Apache-2.0

"""Federation directives: versions, the catalog, and per-element directive sets."""

from fedsdl.directives.annotations import (
    DirectiveArgument,
    DirectiveInstance,
    DirectiveSet,
    FederationOptions,
    HasDirectives,
    split_federation_options,
)
from fedsdl.directives.catalog import (
    DEFAULT_CATALOG,
    DirectiveCatalog,
    DirectiveDefinition,
    build_default_catalog,
)
from fedsdl.directives.version import VersionSpec, parse_version

__all__ = [
    # Versions
    "VersionSpec",
    "parse_version",
    # Catalog
    "DirectiveDefinition",
    "DirectiveCatalog",
    "DEFAULT_CATALOG",
    "build_default_catalog",
    # Applied directives
    "DirectiveArgument",
    "DirectiveInstance",
    "DirectiveSet",
    "FederationOptions",
    "HasDirectives",
    "split_federation_options",
]
