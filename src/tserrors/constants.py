# topmark:header:start
#
#   project      : TSErrors
#   file         : constants.py
#   file_relpath : src/tserrors/constants.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""TSErrors Constants."""

from __future__ import annotations

from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as get_version
from typing import Final

try:
    TSERRORS_VERSION: str = get_version("ts-errors")
except PackageNotFoundError:  # pragma: no cover - running from a source checkout
    TSERRORS_VERSION = "0.0.0"

# Name of the bundled default config inside the package `tserrors.config`:
DEFAULT_TOML_CONFIG_PACKAGE: Final[str] = "tserrors.config"
DEFAULT_TOML_CONFIG_NAME: Final[str] = "tserrors-default.toml"

# Project config file names, in same-directory merge order.
PYPROJECT_TOML_NAME: Final[str] = "pyproject.toml"
TSERRORS_TOML_NAME: Final[str] = "tserrors.toml"

TOPMARK_END_MARKER: Final[str] = "topmark:header:end"

# Language tag attached to code segments.
DEFAULT_CODE_LANG: Final[str] = "typescript"

# Quoted spans shorter than this are never treated as type literals.
MIN_TYPE_LITERAL_LENGTH: Final[int] = 30

# Synthetic declaration used to make a bare type expression parseable.
WRAPPER_TYPE_NAME: Final[str] = "__TSErrorsType__"
ELLIPSIS_TOKEN: Final[str] = "..."
ELLIPSIS_PLACEHOLDER: Final[str] = "__TS_ELLIPSIS__"

# Rolling hash parameters for cache keys.
CACHE_HASH_MULTIPLIER: Final[int] = 31
CACHE_HASH_MODULUS: Final[int] = 2147483647

# Delay (seconds) before delivering a cached result on the async path.
CACHE_HIT_DELAY: Final[float] = 0.1

# prettierd takes a file name hint instead of CLI options.
PRETTIERD_STDIN_FILENAME: Final[str] = "stdin.ts"
