# Copyright 2026 FedSDL Contributors
# SPDX-License-Identifier: Apache-2.0

"""Sphinx configuration for the fedsdl documentation."""

project = "fedsdl"
author = "FedSDL Contributors"
release = "0.1.0"

extensions: list[str] = ["sphinx.ext.autodoc"]

html_theme = "alabaster"
