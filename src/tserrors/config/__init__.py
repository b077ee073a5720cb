# topmark:header:start
#
#   project      : TSErrors
#   file         : __init__.py
#   file_relpath : src/tserrors/config/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Configuration handling for TSErrors.

Exposes the immutable `Config` snapshot and its `MutableConfig` builder. TOML
parsing and rendering live in `tserrors.config.io`; key names live in
`tserrors.config.keys`.
"""

from __future__ import annotations

from tserrors.config.model import ArgsLike, Config, MutableConfig

__all__: list[str] = [
    "ArgsLike",
    "Config",
    "MutableConfig",
]
