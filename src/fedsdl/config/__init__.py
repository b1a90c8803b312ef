# Copyright 2026 FedSDL Contributors
# SPDX-License-Identifier: Apache-2.0

"""fedsdl configuration file support."""

from fedsdl.config.loader import (
    CONFIG_FILE_NAME,
    FederationConfig,
    load_federation_config,
    parse_federation_config,
)
from fedsdl.errors import FederationConfigError

__all__ = [
    "CONFIG_FILE_NAME",
    "FederationConfig",
    "FederationConfigError",
    "load_federation_config",
    "parse_federation_config",
]
