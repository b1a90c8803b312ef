# Copyright 2026 FedSDL Contributors
# SPDX-License-Identifier: Apache-2.0

"""Exception hierarchy shared by the federation directive model and printer."""

# ###############
# Public Interface
# ###############


class FederationError(Exception):
    """Base class for every error raised by fedsdl."""


class InvalidVersionError(FederationError, ValueError):
    """Raised when a federation version identifier cannot be parsed.

    Attributes:
        value: The rejected input, as supplied by the caller.
    """

    def __init__(self, value: object) -> None:
        super().__init__(f"Invalid federation version: {value!r}")
        self.value = value


class UnknownDirectiveError(FederationError, KeyError):
    """Raised when a directive name is not registered in the catalog."""

    def __init__(self, name: str) -> None:
        super().__init__(name)
        self.name = name

    def __str__(self) -> str:
        return f"Unknown directive '@{self.name}'"


class InvalidDirectiveLocationError(FederationError):
    """Raised when a directive is attached at a location the catalog forbids."""

    def __init__(self, name: str, location: str) -> None:
        super().__init__(f"Directive '@{name}' may not be applied at location {location}")
        self.name = name
        self.location = location


class DuplicateDirectiveError(FederationError):
    """Raised when a name is registered twice, or a non-repeatable directive is applied twice."""


class UnresolvedTypeError(FederationError):
    """Raised when a referenced type is not registered in the schema."""

    def __init__(self, name: str) -> None:
        super().__init__(f"Type '{name}' is not registered in the schema")
        self.name = name


class FederationConfigError(FederationError):
    """Raised when a federation configuration file is invalid or cannot be loaded."""
