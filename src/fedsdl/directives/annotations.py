# Copyright 2026 FedSDL Contributors
# SPDX-License-Identifier: Apache-2.0

"""Directive instances and the capability to attach them to schema elements.

:class:`HasDirectives` is mixed into each graphql-core element class that can
carry federation directives. It consumes the federation-only construction
options (``tags``, ``inaccessible``, ``authenticated``, ``directives`` and
``catalog``) before the remaining options reach graphql-core, so the host
framework never sees them.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Mapping, Sequence
from dataclasses import dataclass, field
from typing import Any, ClassVar

from graphql import DirectiveLocation
from pydantic import BaseModel, ConfigDict

from fedsdl.directives.catalog import DEFAULT_CATALOG, DirectiveCatalog
from fedsdl.errors import DuplicateDirectiveError, FederationError, InvalidDirectiveLocationError

# ###############
# Public Interface
# ###############


class DirectiveArgument(BaseModel):
    """One ``name: value`` pair of an applied directive."""

    model_config = ConfigDict(frozen=True)

    name: str
    value: Any = None


class DirectiveInstance(BaseModel):
    """A directive applied to one schema element.

    Attributes:
        name: Directive name without the leading ``@``.
        arguments: Arguments in the order they were supplied.
    """

    model_config = ConfigDict(frozen=True)

    name: str
    arguments: tuple[DirectiveArgument, ...] = ()


ArgumentsInput = Mapping[str, Any] | Sequence[DirectiveArgument | tuple[str, Any] | Mapping[str, Any]]


class DirectiveSet:
    """Insertion-ordered directives owned by a single schema element.

    The same name may appear more than once (``@tag`` is repeatable).
    Once frozen, the set rejects further additions.
    """

    def __init__(self) -> None:
        self._instances: list[DirectiveInstance] = []
        self._frozen = False

    def append(self, instance: DirectiveInstance) -> None:
        if self._frozen:
            raise FederationError(f"Cannot add '@{instance.name}': directives are frozen once the schema is built")
        self._instances.append(instance)

    def freeze(self) -> None:
        self._frozen = True

    @property
    def frozen(self) -> bool:
        return self._frozen

    def names(self) -> list[str]:
        """Return the directive names in insertion order, duplicates included."""
        return [instance.name for instance in self._instances]

    def __contains__(self, name: object) -> bool:
        return any(instance.name == name for instance in self._instances)

    def __iter__(self) -> Iterator[DirectiveInstance]:
        return iter(self._instances)

    def __len__(self) -> int:
        return len(self._instances)

    def __bool__(self) -> bool:
        return bool(self._instances)

    def __repr__(self) -> str:
        return f"DirectiveSet({self._instances!r})"


@dataclass
class FederationOptions:
    """Federation-only construction options extracted from an element's keyword arguments."""

    tags: list[Mapping[str, Any] | str] = field(default_factory=list)
    inaccessible: bool = False
    authenticated: bool = False
    directives: list[DirectiveInstance] = field(default_factory=list)
    catalog: DirectiveCatalog | None = None

    def shorthand_instances(self) -> list[DirectiveInstance]:
        """Translate ``tags``, ``inaccessible`` and ``authenticated`` into directive instances."""
        instances = [
            DirectiveInstance(name="tag", arguments=(DirectiveArgument(name="name", value=_tag_name(tag)),))
            for tag in self.tags
        ]
        if self.inaccessible:
            instances.append(DirectiveInstance(name="inaccessible"))
        if self.authenticated:
            instances.append(DirectiveInstance(name="authenticated"))
        return instances

    def directive_instances(self) -> list[DirectiveInstance]:
        """Translate the shorthand options into directive instances, in attachment order."""
        return [*self.shorthand_instances(), *self.directives]


FEDERATION_OPTION_NAMES = frozenset({"tags", "inaccessible", "authenticated", "directives", "catalog"})


def split_federation_options(kwargs: Mapping[str, Any]) -> tuple[FederationOptions, dict[str, Any]]:
    """Separate federation options from the options meant for the host element.

    Returns:
        The extracted :class:`FederationOptions` and a new dict holding every
        remaining keyword argument, unchanged.
    """
    remaining = {k: v for k, v in kwargs.items() if k not in FEDERATION_OPTION_NAMES}
    options = FederationOptions(
        tags=list(kwargs.get("tags") or ()),
        inaccessible=bool(kwargs.get("inaccessible")),
        authenticated=bool(kwargs.get("authenticated")),
        directives=list(kwargs.get("directives") or ()),
        catalog=kwargs.get("catalog"),
    )
    return options, remaining


def make_arguments(arguments: ArgumentsInput | None) -> tuple[DirectiveArgument, ...]:
    """Normalize the accepted argument spellings into an ordered tuple."""
    if not arguments:
        return ()
    if isinstance(arguments, Mapping):
        return tuple(DirectiveArgument(name=name, value=value) for name, value in arguments.items())
    result: list[DirectiveArgument] = []
    for argument in arguments:
        if isinstance(argument, DirectiveArgument):
            result.append(argument)
        elif isinstance(argument, Mapping):
            result.append(DirectiveArgument(name=argument["name"], value=argument.get("value")))
        else:
            name, value = argument
            result.append(DirectiveArgument(name=name, value=value))
    return tuple(result)


class HasDirectives:
    """Mixin giving a graphql-core element an ordered set of federation directives.

    Subclasses set :attr:`directive_location` to the location the catalog
    checks against, and list the mixin before the graphql-core base class.
    """

    directive_location: ClassVar[DirectiveLocation]

    federation_directives: DirectiveSet
    directive_catalog: DirectiveCatalog

    def __init__(self, *args: Any, **kwargs: Any) -> None:
        options, kwargs = split_federation_options(kwargs)
        super().__init__(*args, **kwargs)
        self.directive_catalog = options.catalog if options.catalog is not None else DEFAULT_CATALOG
        self.federation_directives = DirectiveSet()
        # Shorthand flags are accepted on every element and ignored where their
        # directive is not allowed, e.g. ``authenticated`` on an argument.
        for instance in options.shorthand_instances():
            if self.directive_catalog.lookup(instance.name).allows(self.directive_location):
                self._attach(instance)
        for instance in options.directives:
            self._attach(instance)

    def add_directive(self, name: str, arguments: ArgumentsInput | None = None) -> DirectiveInstance:
        """Apply directive *name* to this element.

        Raises:
            UnknownDirectiveError: If the catalog does not know *name*.
            InvalidDirectiveLocationError: If the directive is not allowed at
                this element's location.
            DuplicateDirectiveError: If a non-repeatable directive is already applied.
        """
        instance = DirectiveInstance(name=name, arguments=make_arguments(arguments))
        self._attach(instance)
        return instance

    def _attach(self, instance: DirectiveInstance) -> None:
        definition = self.directive_catalog.lookup(instance.name)
        if not definition.allows(self.directive_location):
            raise InvalidDirectiveLocationError(instance.name, self.directive_location.name)
        if not definition.repeatable and instance.name in self.federation_directives:
            raise DuplicateDirectiveError(f"Directive '@{instance.name}' is not repeatable")
        self.federation_directives.append(instance)


def iter_directives(element: object) -> Iterable[DirectiveInstance]:
    """Return the federation directives of *element*, or nothing for plain graphql-core elements."""
    directives = getattr(element, "federation_directives", None)
    return directives if directives is not None else ()


# ################
# Implementation
# ################


def _tag_name(tag: Mapping[str, Any] | str) -> str:
    if isinstance(tag, str):
        return tag
    return tag["name"]
