# Copyright 2026 FedSDL Contributors
# SPDX-License-Identifier: Apache-2.0

"""graphql-core element kinds that can carry federation directives.

Each class accepts the same arguments as its graphql-core base, plus the
federation options understood by :class:`~fedsdl.directives.annotations.HasDirectives`::

    FederatedField(GraphQLString, tags=[{"name": "public"}], inaccessible=True)
"""

from __future__ import annotations

from graphql import (
    DirectiveLocation,
    GraphQLArgument,
    GraphQLEnumType,
    GraphQLEnumValue,
    GraphQLField,
    GraphQLInputField,
    GraphQLInputObjectType,
    GraphQLInterfaceType,
    GraphQLObjectType,
    GraphQLScalarType,
    GraphQLUnionType,
)

from fedsdl.directives.annotations import HasDirectives

# ###############
# Public Interface
# ###############


class FederatedObjectType(HasDirectives, GraphQLObjectType):
    """An object type definition."""

    directive_location = DirectiveLocation.OBJECT


class FederatedInterfaceType(HasDirectives, GraphQLInterfaceType):
    """An interface type definition."""

    directive_location = DirectiveLocation.INTERFACE


class FederatedField(HasDirectives, GraphQLField):
    """A field of an object or interface type."""

    directive_location = DirectiveLocation.FIELD_DEFINITION


class FederatedArgument(HasDirectives, GraphQLArgument):
    """An argument of a field."""

    directive_location = DirectiveLocation.ARGUMENT_DEFINITION


class FederatedUnionType(HasDirectives, GraphQLUnionType):
    """A union type definition."""

    directive_location = DirectiveLocation.UNION


class FederatedEnumType(HasDirectives, GraphQLEnumType):
    """An enum type definition.

    Values given as :class:`FederatedEnumValue` keep their directives; graphql-core
    wraps any other value in a plain ``GraphQLEnumValue``.
    """

    directive_location = DirectiveLocation.ENUM


class FederatedEnumValue(HasDirectives, GraphQLEnumValue):
    """A single value of an enum type."""

    directive_location = DirectiveLocation.ENUM_VALUE


class FederatedScalarType(HasDirectives, GraphQLScalarType):
    """A custom scalar type definition."""

    directive_location = DirectiveLocation.SCALAR


class FederatedInputObjectType(HasDirectives, GraphQLInputObjectType):
    """An input object type definition."""

    directive_location = DirectiveLocation.INPUT_OBJECT


class FederatedInputField(HasDirectives, GraphQLInputField):
    """A field of an input object type."""

    directive_location = DirectiveLocation.INPUT_FIELD_DEFINITION
