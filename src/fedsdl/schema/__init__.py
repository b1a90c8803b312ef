# Copyright 2026 FedSDL Contributors
# SPDX-License-Identifier: Apache-2.0

"""Federated schemas and their per-schema federation context."""

from fedsdl.schema.context import SchemaFederationContext, federation_context_of
from fedsdl.schema.federated_schema import FederatedSchema
from fedsdl.schema.traversal import check_references, defined_types, resolve_type

__all__ = [
    "FederatedSchema",
    "SchemaFederationContext",
    "federation_context_of",
    "check_references",
    "defined_types",
    "resolve_type",
]
