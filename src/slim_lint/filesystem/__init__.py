# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Filesystem helpers for path canonicalisation and glob matching."""

from .globbing import any_glob_matches, compile_glob, glob_matches, translate_glob
from .paths import expand_path

__all__ = [
    "any_glob_matches",
    "compile_glob",
    "expand_path",
    "glob_matches",
    "translate_glob",
]
