# Copyright 2026 FedSDL Contributors
# SPDX-License-Identifier: Apache-2.0

"""Schema element kinds that accept federation directives."""

from fedsdl.model.elements import (
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

__all__ = [
    # Output types
    "FederatedObjectType",
    "FederatedInterfaceType",
    "FederatedUnionType",
    "FederatedField",
    "FederatedArgument",
    # Enums and scalars
    "FederatedEnumType",
    "FederatedEnumValue",
    "FederatedScalarType",
    # Input types
    "FederatedInputObjectType",
    "FederatedInputField",
]
