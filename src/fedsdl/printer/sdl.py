# Copyright 2026 FedSDL Contributors
# SPDX-License-Identifier: Apache-2.0

"""Federation SDL printer.

Layout of every construct is left to graphql-core's schema printer. This
module only adds two things on top of it:

* applied federation directives, right after the element they belong to;
* for federation 2 schemas, an ``extend schema @link(...)`` header that
  imports every directive the catalog makes available at the schema's version.

Only directives the catalog makes available at the printed version are
emitted, so the body never uses a directive the header does not import.
Federation 1 schemas, and schemas with no active directive, are printed by
``graphql.print_schema`` unchanged.
"""

from __future__ import annotations

import math
from collections.abc import Iterable
from enum import Enum
from typing import Any

from graphql import (
    GraphQLArgument,
    GraphQLEnumType,
    GraphQLField,
    GraphQLInputField,
    GraphQLInputObjectType,
    GraphQLInterfaceType,
    GraphQLNamedType,
    GraphQLObjectType,
    GraphQLScalarType,
    GraphQLSchema,
    GraphQLUnionType,
    is_enum_type,
    is_input_object_type,
    is_interface_type,
    is_object_type,
    is_scalar_type,
    is_specified_directive,
    is_union_type,
    print_ast,
    print_schema,
)
from graphql.language import (
    BooleanValueNode,
    EnumValueNode,
    FloatValueNode,
    IntValueNode,
    ListValueNode,
    NameNode,
    NullValueNode,
    ObjectFieldNode,
    ObjectValueNode,
    StringValueNode,
    ValueNode,
)
from graphql.utilities.print_schema import (
    print_block,
    print_deprecated,
    print_description,
    print_directive,
    print_implemented_interfaces,
    print_input_value,
    print_schema_definition,
    print_specified_by_url,
    print_type,
)

from fedsdl.directives.annotations import DirectiveInstance, iter_directives
from fedsdl.directives.catalog import DEFAULT_CATALOG, DirectiveCatalog
from fedsdl.directives.version import VersionInput, VersionSpec
from fedsdl.schema.context import federation_context_of
from fedsdl.schema.traversal import check_references, defined_types, iter_elements

# ###############
# Public Interface
# ###############

FEDERATION_SPEC_URL = "https://specs.apollo.dev/federation/v{version}"


class SDLPrinter:
    """Prints graphql-core schemas as federation SDL against one directive catalog."""

    def __init__(
        self,
        catalog: DirectiveCatalog | None = None,
        version: VersionInput | VersionSpec | None = None,
    ) -> None:
        self.catalog = catalog
        # Overrides the version recorded in the schema's federation context.
        self.version = VersionSpec.parse(version) if version is not None else None

    def print(self, schema: GraphQLSchema) -> str:
        """Render *schema*, including the ``@link`` header for federation 2.

        Below federation 2 the result is exactly ``graphql.print_schema(schema)``.
        At federation 2 and above, applied directives whose minimum version is
        higher than the printed version are left out.

        Raises:
            UnresolvedTypeError: If a referenced type is not registered in *schema*.
            UnknownDirectiveError: If an element carries a directive the catalog
                does not define.
        """
        catalog = self._catalog_for(schema)
        version = self.version if self.version is not None else federation_context_of(schema).version()
        check_references(schema)
        _check_directives(schema, catalog)

        if not version.is_federation_2():
            return print_schema(schema)

        applied = _AppliedDirectives(catalog, version)
        types = defined_types(schema)
        if any(applied.has_directives(type_) for type_ in types):
            body = "\n\n".join(
                (
                    *filter(None, (print_schema_definition(schema),)),
                    *(print_directive(d) for d in schema.directives if not is_specified_directive(d)),
                    *(_print_type(type_, applied) for type_ in types),
                )
            )
        else:
            body = print_schema(schema)

        header = link_header(version, catalog)
        return f"{header}\n\n{body}" if body else header

    def _catalog_for(self, schema: GraphQLSchema) -> DirectiveCatalog:
        if self.catalog is not None:
            return self.catalog
        catalog = getattr(schema, "directive_catalog", None)
        return catalog if catalog is not None else DEFAULT_CATALOG


def print_federation_sdl(
    schema: GraphQLSchema,
    catalog: DirectiveCatalog | None = None,
    version: VersionInput | VersionSpec | None = None,
) -> str:
    """Render *schema* as federation SDL. See :meth:`SDLPrinter.print`."""
    return SDLPrinter(catalog, version).print(schema)


def link_imports(version: VersionSpec, catalog: DirectiveCatalog) -> list[str]:
    """Return the ``@link`` import list for *version*, e.g. ``["@inaccessible", "@tag"]``."""
    return [f"@{definition.name}" for definition in catalog.eligible_directives(version)]


def link_header(version: VersionSpec, catalog: DirectiveCatalog) -> str:
    """Return the ``extend schema @link(...)`` block, without a trailing blank line."""
    url = FEDERATION_SPEC_URL.format(version=version)
    imports = ", ".join(f'"{name}"' for name in link_imports(version, catalog))
    return f'extend schema\n  @link(url: "{url}", import: [{imports}])'


def active_directives(
    directives: Iterable[DirectiveInstance],
    catalog: DirectiveCatalog,
    version: VersionSpec,
) -> list[DirectiveInstance]:
    """Return the directives whose catalog minimum version is at most *version*, in order.

    Raises:
        UnknownDirectiveError: If a directive is missing from *catalog*.
    """
    return [directive for directive in directives if catalog.lookup(directive.name).min_version <= version]


def print_applied_directives(
    directives: Iterable[DirectiveInstance],
    catalog: DirectiveCatalog,
    version: VersionSpec,
) -> str:
    """Render applied directives as `` @name(arg: value) @other``; empty when there are none.

    Directives not yet available at *version* are left out.

    Raises:
        UnknownDirectiveError: If a directive is missing from *catalog*.
    """
    active = active_directives(directives, catalog, version)
    return "".join(" " + _print_directive_instance(directive) for directive in active)


def print_literal(value: Any) -> str:
    """Render a Python value as a GraphQL literal using graphql-core's AST printer."""
    return print_ast(_value_node(value))


# ################
# Implementation
# ################


class _AppliedDirectives:
    """Renders the directives of single elements that are active at one version."""

    def __init__(self, catalog: DirectiveCatalog, version: VersionSpec) -> None:
        self.catalog = catalog
        self.version = version

    def of(self, element: object) -> str:
        return print_applied_directives(iter_directives(element), self.catalog, self.version)

    def has_directives(self, type_: GraphQLNamedType) -> bool:
        return any(
            active_directives(iter_directives(element), self.catalog, self.version) for element in iter_elements(type_)
        )


def _check_directives(schema: GraphQLSchema, catalog: DirectiveCatalog) -> None:
    for type_ in defined_types(schema):
        for element in iter_elements(type_):
            for directive in iter_directives(element):
                catalog.lookup(directive.name)


def _print_directive_instance(directive: DirectiveInstance) -> str:
    if not directive.arguments:
        return f"@{directive.name}"
    args = ", ".join(f"{arg.name}: {print_literal(arg.value)}" for arg in directive.arguments)
    return f"@{directive.name}({args})"


def _value_node(value: Any) -> ValueNode:
    if value is None:
        return NullValueNode()
    if isinstance(value, bool):
        return BooleanValueNode(value=value)
    if isinstance(value, Enum):
        return EnumValueNode(value=value.name)
    if isinstance(value, int):
        return IntValueNode(value=str(value))
    if isinstance(value, float):
        if not math.isfinite(value):
            raise TypeError(f"Cannot print non-finite float {value!r} as a GraphQL literal")
        return FloatValueNode(value=repr(value))
    if isinstance(value, str):
        return StringValueNode(value=value)
    if isinstance(value, dict):
        return ObjectValueNode(
            fields=tuple(
                ObjectFieldNode(name=NameNode(value=str(key)), value=_value_node(item)) for key, item in value.items()
            )
        )
    if isinstance(value, (list, tuple)):
        return ListValueNode(values=tuple(_value_node(item) for item in value))
    raise TypeError(f"Cannot print {value!r} as a GraphQL literal")


def _print_type(type_: GraphQLNamedType, applied: _AppliedDirectives) -> str:
    if not applied.has_directives(type_):
        return print_type(type_)
    if is_object_type(type_) or is_interface_type(type_):
        return _print_object_like(type_, applied)
    if is_union_type(type_):
        return _print_union(type_, applied)
    if is_enum_type(type_):
        return _print_enum(type_, applied)
    if is_input_object_type(type_):
        return _print_input_object(type_, applied)
    if is_scalar_type(type_):
        return _print_scalar(type_, applied)
    return print_type(type_)


def _print_object_like(type_: GraphQLObjectType | GraphQLInterfaceType, applied: _AppliedDirectives) -> str:
    keyword = "type" if is_object_type(type_) else "interface"
    return (
        print_description(type_)
        + f"{keyword} {type_.name}"
        + print_implemented_interfaces(type_)
        + applied.of(type_)
        + _print_fields(type_, applied)
    )


def _print_fields(type_: GraphQLObjectType | GraphQLInterfaceType, applied: _AppliedDirectives) -> str:
    fields = [
        print_description(field, "  ", not i)
        + f"  {name}"
        + _print_args(field, applied)
        + f": {field.type}"
        + print_deprecated(field.deprecation_reason)
        + applied.of(field)
        for i, (name, field) in enumerate(type_.fields.items())
    ]
    return print_block(fields)


def _print_args(field: GraphQLField, applied: _AppliedDirectives) -> str:
    args = field.args
    if not args:
        return ""
    # Without descriptions all arguments fit on one line.
    if not any(arg.description for arg in args.values()):
        return "(" + ", ".join(_print_input_value(name, arg, applied) for name, arg in args.items()) + ")"
    return (
        "(\n"
        + "\n".join(
            print_description(arg, "    ", not i) + "    " + _print_input_value(name, arg, applied)
            for i, (name, arg) in enumerate(args.items())
        )
        + "\n  )"
    )


def _print_input_value(name: str, value: GraphQLArgument | GraphQLInputField, applied: _AppliedDirectives) -> str:
    return print_input_value(name, value) + applied.of(value)


def _print_union(type_: GraphQLUnionType, applied: _AppliedDirectives) -> str:
    types = type_.types
    possible_types = " = " + " | ".join(t.name for t in types) if types else ""
    return print_description(type_) + f"union {type_.name}" + applied.of(type_) + possible_types


def _print_enum(type_: GraphQLEnumType, applied: _AppliedDirectives) -> str:
    values = [
        print_description(value, "  ", not i)
        + f"  {name}"
        + print_deprecated(value.deprecation_reason)
        + applied.of(value)
        for i, (name, value) in enumerate(type_.values.items())
    ]
    return print_description(type_) + f"enum {type_.name}" + applied.of(type_) + print_block(values)


def _print_input_object(type_: GraphQLInputObjectType, applied: _AppliedDirectives) -> str:
    fields = [
        print_description(field, "  ", not i) + "  " + _print_input_value(name, field, applied)
        for i, (name, field) in enumerate(type_.fields.items())
    ]
    return print_description(type_) + f"input {type_.name}" + applied.of(type_) + print_block(fields)


def _print_scalar(type_: GraphQLScalarType, applied: _AppliedDirectives) -> str:
    return print_description(type_) + f"scalar {type_.name}" + print_specified_by_url(type_) + applied.of(type_)
