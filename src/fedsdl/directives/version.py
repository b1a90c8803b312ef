# Copyright 2026 FedSDL Contributors
# SPDX-License-Identifier: Apache-2.0

"""Comparable federation version identifiers.

Versions arrive as integers, floats, or dotted strings (``2``, ``2.3``,
``"2.0.1"``). They are normalized once into a tuple of integer components;
everything downstream compares tuples and never looks at the original type.
"""

from __future__ import annotations

import math
import re
from dataclasses import dataclass, field

from fedsdl.errors import InvalidVersionError

# ###############
# Public Interface
# ###############

VersionInput = int | float | str


@dataclass(frozen=True, order=True)
class VersionSpec:
    """A normalized federation version.

    Attributes:
        components: Numeric components with trailing zeros removed, so that
            ``"2"`` and ``"2.0"`` compare equal.
        literal: The version text as supplied, used verbatim in the ``@link`` URL.
    """

    components: tuple[int, ...]
    literal: str = field(default="", compare=False)

    @classmethod
    def parse(cls, value: VersionInput | VersionSpec) -> VersionSpec:
        """Parse an integer, float, or dotted string into a VersionSpec.

        Raises:
            InvalidVersionError: If *value* is not a non-negative number or a
                string of dot-separated non-negative integers.
        """
        if isinstance(value, VersionSpec):
            return value
        # bool is a subclass of int but is never a version.
        if isinstance(value, bool):
            raise InvalidVersionError(value)
        if isinstance(value, int):
            if value < 0:
                raise InvalidVersionError(value)
            literal = str(value)
        elif isinstance(value, float):
            if not math.isfinite(value) or value < 0:
                raise InvalidVersionError(value)
            literal = repr(value)
        elif isinstance(value, str):
            literal = value.strip()
        else:
            raise InvalidVersionError(value)

        if not _VERSION_PATTERN.fullmatch(literal):
            raise InvalidVersionError(value)
        return cls(components=_normalize(int(part) for part in literal.split(".")), literal=literal)

    def is_federation_2(self) -> bool:
        """Return True if this version is 2.0 or later."""
        return self >= FEDERATION_2

    def __str__(self) -> str:
        return self.literal or ".".join(str(c) for c in self.components) or "0"


def parse_version(value: VersionInput | VersionSpec) -> VersionSpec:
    """Shorthand for :meth:`VersionSpec.parse`."""
    return VersionSpec.parse(value)


# ################
# Implementation
# ################

_VERSION_PATTERN = re.compile(r"\d+(\.\d+)*")


def _normalize(parts) -> tuple[int, ...]:
    components = list(parts)
    while components and components[-1] == 0:
        components.pop()
    return tuple(components)


FEDERATION_2 = VersionSpec(components=(2,), literal="2.0")
DEFAULT_VERSION = VersionSpec(components=(1,), literal="1.0")
