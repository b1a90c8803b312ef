# Copyright 2026 FedSDL Contributors
# SPDX-License-Identifier: Apache-2.0

"""Federation SDL printer."""

from fedsdl.printer.sdl import (
    FEDERATION_SPEC_URL,
    SDLPrinter,
    link_header,
    link_imports,
    print_federation_sdl,
    print_literal,
)

__all__ = [
    "FEDERATION_SPEC_URL",
    "SDLPrinter",
    "link_header",
    "link_imports",
    "print_federation_sdl",
    "print_literal",
]
