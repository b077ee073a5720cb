# topmark:header:start
#
#   project      : TSErrors
#   file         : getters.py
#   file_relpath : src/tserrors/config/io/getters.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Checked value getters for TOML config tables.

Each getter validates the expected shape of a value. Missing keys yield
``None`` (or an empty list) so the merge layer can tell "unset" from "set".
Values of the wrong type are dropped: the getter logs a warning and appends a
human-readable note to the caller's ``issues`` list, so user mistakes are
surfaced without crashing or changing defaulting behavior.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Final

from tserrors.config.logging import get_logger

from .guards import is_any_list

if TYPE_CHECKING:
    from tserrors.config.logging import TsErrorsLogger

    from .types import TomlTable

logger: TsErrorsLogger = get_logger(__name__)


def _reject(loc: str, expected: str, value: object, issues: list[str]) -> None:
    message: str = f"Expected {expected} in {loc}, got {type(value).__name__}: {value!r}"
    logger.warning("%s", message)
    issues.append(message)


def get_string_value_or_none_checked(
    table: TomlTable,
    key: str,
    *,
    where: str,
    issues: list[str],
) -> str | None:
    """Return an optional string value, recording an issue when present but not `str`.

    Args:
        table (TomlTable): Table to query.
        key (str): Key to extract.
        where (str): TOML location prefix used in messages (e.g. ``"[formatter]"``).
        issues (list[str]): Accumulator for validation messages.

    Returns:
        str | None: The string value, or ``None`` when absent or invalid.
    """
    value: Any | None = table.get(key)
    if value is None or isinstance(value, str):
        return value
    _reject(f"{where}.{key}", "string", value, issues)
    return None


def get_bool_value_or_none_checked(
    table: TomlTable,
    key: str,
    *,
    where: str,
    issues: list[str],
) -> bool | None:
    """Return an optional boolean value, recording an issue when present but not `bool`.

    Integers are **not** coerced.
    """
    value: Any | None = table.get(key)
    if value is None or isinstance(value, bool):
        return value
    _reject(f"{where}.{key}", "bool", value, issues)
    return None


def get_int_value_or_none_checked(
    table: TomlTable,
    key: str,
    *,
    where: str,
    issues: list[str],
) -> int | None:
    """Return an optional int value, recording an issue when present but not `int`.

    Notes:
        - Missing key / None -> None
        - `bool` is rejected (since `bool` is a subclass of `int`).
    """
    value: Any | None = table.get(key)
    if value is None:
        return None
    if isinstance(value, int) and not isinstance(value, bool):
        return value
    _reject(f"{where}.{key}", "int", value, issues)
    return None


def get_string_list_value_or_none_checked(
    table: TomlTable,
    key: str,
    *,
    where: str,
    issues: list[str],
) -> list[str] | None:
    """Extract an optional list of strings from a TOML table.

    Behavior:
        - If the key is missing, returns ``None``.
        - If the value is not a list, records an issue and returns ``None``.
        - Non-string items are dropped, each with its own issue.

    Args:
        table (TomlTable): TOML table to query.
        key (str): Key to extract.
        where (str): TOML location prefix (e.g. ``"[formatter]"``).
        issues (list[str]): Accumulator for validation messages.

    Returns:
        list[str] | None: Filtered list containing only string entries, or ``None``.
    """
    value: Any | None = table.get(key)
    if value is None:
        return None

    loc: Final[str] = f"{where}.{key}"

    if not is_any_list(value):
        _reject(loc, "list", value, issues)
        return None

    out: list[str] = []
    for v in value:
        if isinstance(v, str):
            out.append(v)
        else:
            message: str = f"Ignoring non-string entry in {loc}: {v!r}"
            logger.warning("%s", message)
            issues.append(message)
    return out
