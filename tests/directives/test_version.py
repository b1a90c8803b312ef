# Copyright 2026 FedSDL Contributors
# SPDX-License-Identifier: Apache-2.0

"""Tests for federation version parsing and comparison."""

import pytest

from fedsdl.directives.version import DEFAULT_VERSION, VersionSpec, parse_version
from fedsdl.errors import InvalidVersionError

# ###############
# Parsing
# ###############


@pytest.mark.parametrize("value", [2, 2.0, "2.0", "2"])
def test_integer_float_and_string_forms_of_two_are_equal(value: object) -> None:
    """2, 2.0, "2.0" and "2" all normalize to the same version."""
    assert VersionSpec.parse(value) == VersionSpec.parse("2.0")


def test_literal_is_kept_as_supplied() -> None:
    """The printed form is the text the caller wrote, not a renormalized one."""
    assert str(VersionSpec.parse("2.3")) == "2.3"
    assert str(VersionSpec.parse("2.0.1")) == "2.0.1"
    assert str(VersionSpec.parse(2)) == "2"
    assert str(VersionSpec.parse(2.3)) == "2.3"


def test_surrounding_whitespace_is_ignored() -> None:
    """Whitespace around a string version is stripped."""
    assert VersionSpec.parse(" 2.3 ") == VersionSpec.parse("2.3")
    assert str(VersionSpec.parse(" 2.3 ")) == "2.3"


def test_parse_accepts_an_existing_version() -> None:
    """Parsing a VersionSpec returns it unchanged."""
    version = VersionSpec.parse("2.5")
    assert VersionSpec.parse(version) is version


def test_parse_version_shorthand() -> None:
    """parse_version is an alias for VersionSpec.parse."""
    assert parse_version("2.1") == VersionSpec.parse("2.1")


def test_trailing_zeros_are_dropped_from_components() -> None:
    """Components are normalized so that missing trailing parts count as zero."""
    assert VersionSpec.parse("2.0.0").components == (2,)
    assert VersionSpec.parse("2.3").components == (2, 3)


@pytest.mark.parametrize(
    "value",
    ["", "abc", "2.", ".2", "2..3", "2.x", "v2.3", "-1", "2.3-beta", -1, -0.5, float("nan"), float("inf"), True, None],
)
def test_invalid_versions_are_rejected(value: object) -> None:
    """Anything but non-negative numbers or dotted digit strings raises InvalidVersionError."""
    with pytest.raises(InvalidVersionError):
        VersionSpec.parse(value)  # type: ignore[arg-type]


def test_invalid_version_error_is_a_value_error() -> None:
    """InvalidVersionError can be caught as a ValueError and keeps the rejected input."""
    with pytest.raises(ValueError) as exc_info:
        VersionSpec.parse("two")
    assert exc_info.value.value == "two"  # type: ignore[attr-defined]


# ###############
# Comparison
# ###############


def test_patch_version_compares_greater() -> None:
    """2.0.1 is greater than 2.0."""
    assert VersionSpec.parse("2.0.1") > VersionSpec.parse("2.0")


def test_comparison_is_numeric_not_lexical() -> None:
    """2.10 is greater than 2.9."""
    assert VersionSpec.parse("2.10") > VersionSpec.parse("2.9")


def test_equal_versions_hash_alike() -> None:
    """Equal versions can be used interchangeably as dict keys."""
    assert hash(VersionSpec.parse("2")) == hash(VersionSpec.parse("2.0"))


# ###############
# Federation 2 predicate
# ###############


@pytest.mark.parametrize("value", [2, 2.0, "2.0", "2.0.1", "2.3", 2.3, "10"])
def test_federation_2_versions(value: object) -> None:
    """Versions at or above 2.0 are federation 2."""
    assert VersionSpec.parse(value).is_federation_2()


@pytest.mark.parametrize("value", [1, "1.5", 1.9, "0", "1.99.99"])
def test_federation_1_versions(value: object) -> None:
    """Versions below 2.0 are federation 1."""
    assert not VersionSpec.parse(value).is_federation_2()


def test_default_version_is_federation_1() -> None:
    """The default version is 1.0."""
    assert str(DEFAULT_VERSION) == "1.0"
    assert not DEFAULT_VERSION.is_federation_2()
