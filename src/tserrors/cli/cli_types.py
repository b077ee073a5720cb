# topmark:header:start
#
#   project      : TSErrors
#   file         : cli_types.py
#   file_relpath : src/tserrors/cli/cli_types.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Shared CLI parameter types and argument namespaces.

Defines `OutputFormat`, the `EnumChoiceParam` Click parameter type, and the
`ArgsNamespace` mapping handed to `tserrors.config.MutableConfig.apply_cli_args`.
"""

from __future__ import annotations

from enum import Enum
from typing import TYPE_CHECKING, Generic, NoReturn, Protocol, TypedDict, TypeVar, cast

import click

if TYPE_CHECKING:
    from collections.abc import Iterable

    from click.shell_completion import CompletionItem as ClickCompletionItem

    class ParamTypeBase(Protocol):
        """Typed base to avoid subclassing Any when Click lacks stubs."""

        name: str

else:
    # At runtime, subclass the real Click type
    ParamTypeBase = click.ParamType

# Type variable bounded to Enum for generic EnumChoiceParam
E = TypeVar("E", bound=Enum)


class OutputFormat(str, Enum):
    """Output format for CLI rendering.

    Members:
      DEFAULT: Human-friendly text output; may include ANSI color if enabled.
      MARKDOWN: Markdown document.
      JSON: A single JSON document (machine-readable, never colored).
    """

    DEFAULT = "default"
    MARKDOWN = "markdown"
    JSON = "json"


class ArgsNamespace(TypedDict, total=False):
    """Config overrides collected from CLI options.

    ``None`` means "not given on the command line"; the value from config files
    (or the built-in default) is kept.

    Attributes:
        formatter_cmd (str | None): ``--formatter-cmd``.
        print_width (int | None): ``--print-width``.
        timeout_ms (int | None): ``--timeout-ms``.
        sync_format (bool | None): ``--sync`` / ``--async``.
        cache_enabled (bool | None): ``False`` with ``--no-cache``.
        title (str | None): ``--title``.
    """

    formatter_cmd: str | None
    print_width: int | None
    timeout_ms: int | None
    sync_format: bool | None
    cache_enabled: bool | None
    title: str | None


def build_args_namespace(
    *,
    formatter_cmd: str | None = None,
    print_width: int | None = None,
    timeout_ms: int | None = None,
    sync_format: bool | None = None,
    no_cache: bool = False,
    title: str | None = None,
) -> ArgsNamespace:
    """Build an `ArgsNamespace` from parsed Click values."""
    return {
        "formatter_cmd": formatter_cmd,
        "print_width": print_width,
        "timeout_ms": timeout_ms,
        "sync_format": sync_format,
        "cache_enabled": False if no_cache else None,
        "title": title,
    }


class EnumChoiceParam(ParamTypeBase, Generic[E]):
    """A Click parameter type that converts a string to a member of a given Enum."""

    enum_cls: type[E]
    name: str
    choices: list[str]

    def __init__(self, enum_cls: type[E]) -> None:
        self.enum_cls = enum_cls
        self.name = self.enum_cls.__name__.lower()
        # Assume the enum exposes string-valued members (e.g., OutputFormat)
        self.choices = [cast("str", getattr(e, "value", str(e))) for e in self.enum_cls]

    def _fail_noreturn(
        self,
        message: str,
        param: click.Parameter | None,
        ctx: click.Context | None,
    ) -> NoReturn:
        raise click.BadParameter(message, param=param, ctx=ctx)

    def convert(
        self,
        value: str | E | None,
        param: click.Parameter | None,
        ctx: click.Context | None,
    ) -> E | None:
        """Convert a string to a member of the Enum (case-insensitive)."""
        if value is None or isinstance(value, self.enum_cls):
            return value

        lookup: dict[str, E] = {
            cast("str", getattr(choice, "value", str(choice))).lower(): choice
            for choice in cast("Iterable[E]", self.enum_cls)
        }

        key: str = str(value).lower()
        if key in lookup:
            return lookup[key]

        self._fail_noreturn(
            f"Invalid value '{value}'. Must be one of: {', '.join(self.choices)}",
            param,
            ctx,
        )

    def shell_complete(
        self,
        ctx: click.Context,
        param: click.Parameter,
        incomplete: str,
    ) -> list[ClickCompletionItem]:
        """Tab completion for Click.

        Bash: `eval "$(_TSERRORS_COMPLETE=bash_source tserrors)"`
        """
        from click.shell_completion import CompletionItem as RuntimeCompletionItem

        prefix: str = (incomplete or "").lower()
        return [
            RuntimeCompletionItem(val)
            for val in self.choices
            if val.lower().startswith(prefix)
        ]

    def __repr__(self) -> str:
        """Return a string representation."""
        return f"EnumChoiceParam({self.enum_cls.__name__})"
