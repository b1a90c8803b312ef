# Copyright 2026 FedSDL Contributors
# SPDX-License-Identifier: Apache-2.0

"""Walks over the elements of a graphql-core schema."""

from __future__ import annotations

from collections.abc import Iterator

from graphql import (
    GraphQLNamedType,
    GraphQLSchema,
    get_named_type,
    is_enum_type,
    is_input_object_type,
    is_interface_type,
    is_introspection_type,
    is_object_type,
    is_specified_scalar_type,
    is_union_type,
)

from fedsdl.errors import UnresolvedTypeError

# ###############
# Public Interface
# ###############


def is_defined_type(type_: GraphQLNamedType) -> bool:
    """Return True for types a schema printer emits (not built-in scalars or introspection types)."""
    return not is_specified_scalar_type(type_) and not is_introspection_type(type_)


def defined_types(schema: GraphQLSchema) -> list[GraphQLNamedType]:
    """Return the types reachable from the root operations and the extra ``types``, in schema order."""
    return [type_ for type_ in schema.type_map.values() if is_defined_type(type_)]


def iter_elements(type_: GraphQLNamedType) -> Iterator[object]:
    """Yield *type_* followed by every field, argument, enum value, and input field it owns."""
    yield type_
    if is_object_type(type_) or is_interface_type(type_):
        for field in type_.fields.values():
            yield field
            yield from field.args.values()
    elif is_input_object_type(type_):
        yield from type_.fields.values()
    elif is_enum_type(type_):
        yield from type_.values.values()


def iter_schema_elements(schema: GraphQLSchema) -> Iterator[object]:
    """Yield every annotatable element of every defined type in *schema*."""
    for type_ in defined_types(schema):
        yield from iter_elements(type_)


def resolve_type(schema: GraphQLSchema, name: str) -> GraphQLNamedType:
    """Look up a named type, failing loudly when it is not registered.

    Raises:
        UnresolvedTypeError: If *schema* has no type called *name*.
    """
    type_ = schema.get_type(name)
    if type_ is None:
        raise UnresolvedTypeError(name)
    return type_


def check_references(schema: GraphQLSchema) -> None:
    """Verify every type referenced by a defined type is registered in *schema*.

    Raises:
        UnresolvedTypeError: On the first dangling reference.
    """
    for type_ in defined_types(schema):
        for name in _referenced_type_names(type_):
            resolve_type(schema, name)


# ################
# Implementation
# ################


def _referenced_type_names(type_: GraphQLNamedType) -> Iterator[str]:
    if is_object_type(type_) or is_interface_type(type_):
        for interface in type_.interfaces:
            yield interface.name
        for field in type_.fields.values():
            yield get_named_type(field.type).name
            for arg in field.args.values():
                yield get_named_type(arg.type).name
    elif is_union_type(type_):
        for member in type_.types:
            yield member.name
    elif is_input_object_type(type_):
        for field in type_.fields.values():
            yield get_named_type(field.type).name
