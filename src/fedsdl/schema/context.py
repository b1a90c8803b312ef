# Copyright 2026 FedSDL Contributors
# SPDX-License-Identifier: Apache-2.0

"""Per-schema federation state."""

from __future__ import annotations

from fedsdl.directives.version import DEFAULT_VERSION, VersionInput, VersionSpec

# ###############
# Public Interface
# ###############


class SchemaFederationContext:
    """Holds the federation version selected for one schema.

    The version is parsed when it is set, so a malformed identifier fails
    while the schema is being defined rather than when it is printed.
    Setting it again replaces the previous value.
    """

    def __init__(self, version: VersionInput | VersionSpec | None = None) -> None:
        self._version: VersionSpec | None = None
        if version is not None:
            self.set_version(version)

    def set_version(self, version: VersionInput | VersionSpec) -> None:
        self._version = VersionSpec.parse(version)

    def version(self) -> VersionSpec:
        """Return the selected version, ``1.0`` when none was set."""
        return self._version if self._version is not None else DEFAULT_VERSION

    @property
    def is_version_set(self) -> bool:
        return self._version is not None

    def is_federation_2(self) -> bool:
        return self.version().is_federation_2()


def federation_context_of(schema: object) -> SchemaFederationContext:
    """Return the federation context of *schema*; plain schemas get a default (1.0) context."""
    context = getattr(schema, "federation_context", None)
    return context if context is not None else SchemaFederationContext()
