# Copyright 2026 FedSDL Contributors
# SPDX-License-Identifier: Apache-2.0

"""Tests for the federated element kinds and directive attachment."""

import pytest
from graphql import (
    GraphQLArgument,
    GraphQLEnumValue,
    GraphQLField,
    GraphQLID,
    GraphQLInputField,
    GraphQLNonNull,
    GraphQLObjectType,
    GraphQLString,
)

from fedsdl.directives.annotations import DirectiveArgument, DirectiveInstance
from fedsdl.directives.catalog import DEFAULT_CATALOG, DirectiveCatalog, DirectiveDefinition
from fedsdl.errors import DuplicateDirectiveError, InvalidDirectiveLocationError, UnknownDirectiveError
from fedsdl.model import (
    FederatedArgument,
    FederatedEnumType,
    FederatedEnumValue,
    FederatedField,
    FederatedInputField,
    FederatedInputObjectType,
    FederatedInterfaceType,
    FederatedObjectType,
    FederatedScalarType,
    FederatedUnionType,
)

# ###############
# Helpers
# ###############


def _tag(name: str) -> DirectiveInstance:
    return DirectiveInstance(name="tag", arguments=(DirectiveArgument(name="name", value=name),))


# ###############
# Construction
# ###############


def test_federated_field_is_a_graphql_field() -> None:
    """Federated elements are ordinary graphql-core elements."""
    field = FederatedField(GraphQLString, description="A field")
    assert isinstance(field, GraphQLField)
    assert field.type is GraphQLString
    assert field.description == "A field"
    assert len(field.federation_directives) == 0


def test_federation_options_are_not_forwarded() -> None:
    """graphql-core would reject unknown keyword arguments; they are stripped first."""
    field = FederatedField(GraphQLString, tags=[{"name": "x"}], inaccessible=True, authenticated=True)
    assert field.federation_directives.names() == ["tag", "inaccessible", "authenticated"]


def test_tags_attach_in_order() -> None:
    """tags=[x, y] attaches @tag(name: "x") then @tag(name: "y")."""
    field = FederatedField(GraphQLString, tags=[{"name": "x"}, {"name": "y"}])
    assert list(field.federation_directives) == [_tag("x"), _tag("y")]


def test_inaccessible_attaches_directive_without_arguments() -> None:
    """inaccessible=True attaches one @inaccessible with no arguments."""
    obj = FederatedObjectType("Hidden", {"id": GraphQLField(GraphQLID)}, inaccessible=True)
    assert list(obj.federation_directives) == [DirectiveInstance(name="inaccessible")]


def test_each_element_owns_its_directives() -> None:
    """Two elements built with the same options do not share a directive set."""
    first = FederatedField(GraphQLString, inaccessible=True)
    second = FederatedField(GraphQLString, inaccessible=True)
    assert first.federation_directives is not second.federation_directives


@pytest.mark.parametrize(
    ("element", "base"),
    [
        (FederatedArgument(GraphQLString, inaccessible=True), GraphQLArgument),
        (FederatedEnumValue("R", inaccessible=True), GraphQLEnumValue),
        (FederatedInputField(GraphQLString, inaccessible=True), GraphQLInputField),
        (FederatedObjectType("O", {"f": GraphQLField(GraphQLString)}, inaccessible=True), GraphQLObjectType),
    ],
)
def test_inaccessible_is_accepted_on_every_kind(element: object, base: type) -> None:
    """@inaccessible is legal at every annotatable location."""
    assert isinstance(element, base)
    assert element.federation_directives.names() == ["inaccessible"]  # type: ignore[attr-defined]


def test_type_level_elements_accept_tags() -> None:
    """Interfaces, unions, enums, scalars and input objects carry their own directives."""
    node = FederatedInterfaceType("Node", {"id": GraphQLField(GraphQLNonNull(GraphQLID))}, tags=["n"])
    cat = GraphQLObjectType("Cat", {"id": GraphQLField(GraphQLID)})
    pet = FederatedUnionType("Pet", [cat], tags=["u"])
    color = FederatedEnumType("Color", {"RED": FederatedEnumValue("red")}, tags=["e"])
    date = FederatedScalarType("Date", tags=["s"])
    filt = FederatedInputObjectType("Filter", {"term": GraphQLInputField(GraphQLString)}, tags=["i"])
    for element in (node, pet, color, date, filt):
        assert element.federation_directives.names() == ["tag"]


def test_enum_keeps_federated_values() -> None:
    """Enum values given as FederatedEnumValue keep their directives inside the enum."""
    color = FederatedEnumType("Color", {"RED": FederatedEnumValue("red", inaccessible=True), "GREEN": "green"})
    assert color.values["RED"].federation_directives.names() == ["inaccessible"]  # type: ignore[attr-defined]
    assert not hasattr(color.values["GREEN"], "federation_directives")


# ###############
# Location and catalog checks
# ###############


def test_authenticated_shorthand_on_argument_attaches_nothing() -> None:
    """The authenticated option is accepted on arguments but has no effect there."""
    argument = FederatedArgument(GraphQLString, authenticated=True, tags=["a"])
    assert argument.federation_directives.names() == ["tag"]
    assert not hasattr(argument, "authenticated")


def test_authenticated_shorthand_on_union_attaches_nothing() -> None:
    """@authenticated is not legal on unions, so the shorthand is ignored."""
    cat = GraphQLObjectType("Cat", {"id": GraphQLField(GraphQLID)})
    pet = FederatedUnionType("Pet", [cat], authenticated=True)
    assert len(pet.federation_directives) == 0


def test_explicit_authenticated_on_argument_is_rejected() -> None:
    """Explicitly applied directives are still checked against the catalog locations."""
    argument = FederatedArgument(GraphQLString)
    with pytest.raises(InvalidDirectiveLocationError) as exc_info:
        argument.add_directive("authenticated")
    assert exc_info.value.name == "authenticated"
    assert exc_info.value.location == "ARGUMENT_DEFINITION"
    with pytest.raises(InvalidDirectiveLocationError):
        FederatedArgument(GraphQLString, directives=[DirectiveInstance(name="authenticated")])


def test_add_directive_checks_the_catalog() -> None:
    """add_directive rejects names the catalog does not know."""
    field = FederatedField(GraphQLString)
    with pytest.raises(UnknownDirectiveError):
        field.add_directive("key", {"fields": "id"})
    assert len(field.federation_directives) == 0


def test_add_directive_appends_with_arguments() -> None:
    """add_directive attaches an instance after any shorthand directives."""
    field = FederatedField(GraphQLString, inaccessible=True)
    instance = field.add_directive("tag", [("name", "late")])
    assert instance == _tag("late")
    assert list(field.federation_directives) == [DirectiveInstance(name="inaccessible"), _tag("late")]


def test_non_repeatable_directive_cannot_be_applied_twice() -> None:
    """Applying @inaccessible twice to one element raises DuplicateDirectiveError."""
    field = FederatedField(GraphQLString, inaccessible=True)
    with pytest.raises(DuplicateDirectiveError):
        field.add_directive("inaccessible")


def test_custom_catalog_is_used_for_checks() -> None:
    """Elements check directives against the catalog passed to them."""
    catalog = DEFAULT_CATALOG.extended(
        [
            DirectiveDefinition(
                name="shareable",
                min_version="2.0",
                locations=frozenset({FederatedField.directive_location}),
            )
        ]
    )
    field = FederatedField(GraphQLString, catalog=catalog, directives=[DirectiveInstance(name="shareable")])
    assert field.directive_catalog is catalog
    assert field.federation_directives.names() == ["shareable"]

    with pytest.raises(UnknownDirectiveError):
        FederatedField(GraphQLString, directives=[DirectiveInstance(name="shareable")])


def test_empty_catalog_rejects_everything() -> None:
    """An explicitly empty catalog is honoured rather than replaced by the default."""
    with pytest.raises(UnknownDirectiveError):
        FederatedField(GraphQLString, catalog=DirectiveCatalog(), inaccessible=True)
