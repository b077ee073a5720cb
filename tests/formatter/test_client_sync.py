# topmark:header:start
#
#   project      : TSErrors
#   file         : test_client_sync.py
#   file_relpath : tests/formatter/test_client_sync.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

# pyright: strict

"""Tests for the blocking formatter path."""

from __future__ import annotations

from tests.conftest import make_config
from tests.fakes import OBJ_TYPE, OBJ_TYPE_PRETTY, FakeRunner, FakeWhich
from tserrors.formatter.cache import FormatCache
from tserrors.formatter.client import FormatterClient
from tserrors.formatter.job import FormatOutcome
from tserrors.formatter.locator import FormatterLocator


def _client(runner: FakeRunner, **overrides: object) -> FormatterClient:
    overrides.setdefault("formatter_cmd", "fake-prettier")
    return FormatterClient(make_config(**overrides), runner=runner)


def test_format_sync_success_and_argv() -> None:
    """The wrapped, sanitized expression is piped through the formatter."""
    runner = FakeRunner()
    client: FormatterClient = _client(runner, print_width=40)

    assert client.format_sync(OBJ_TYPE) == OBJ_TYPE_PRETTY
    assert runner.calls == [
        (
            ("fake-prettier", "--print-width", "40", "--parser", "typescript"),
            f"type __TSErrorsType__ = {OBJ_TYPE};",
        )
    ]


def test_format_sync_caches_result() -> None:
    """A second request for the same content is served from the cache."""
    runner = FakeRunner()
    client: FormatterClient = _client(runner)
    client.format_sync(OBJ_TYPE)
    client.format_sync(OBJ_TYPE)
    assert len(runner.calls) == 1
    assert client.cache.get(OBJ_TYPE) == OBJ_TYPE_PRETTY


def test_format_sync_without_cache_runs_every_time() -> None:
    """With caching disabled the formatter runs per request."""
    runner = FakeRunner()
    client: FormatterClient = _client(runner, cache_enabled=False)
    client.format_sync(OBJ_TYPE)
    client.format_sync(OBJ_TYPE)
    assert len(runner.calls) == 2


def test_format_sync_not_found() -> None:
    """Without a formatter the content comes back unchanged with an error."""
    runner = FakeRunner()
    client = FormatterClient(
        make_config(),
        locator=FormatterLocator(include_mason=False, which=FakeWhich()),
        runner=runner,
    )
    outcome: FormatOutcome = client.format_sync_outcome(OBJ_TYPE)
    assert outcome == FormatOutcome(OBJ_TYPE, "Prettier not found")
    assert runner.calls == []


def test_format_sync_process_failure() -> None:
    """A non-zero exit yields the original content and a detailed error."""
    runner = FakeRunner(returncode=2, stdout="", stderr="SyntaxError: oops\n")
    client: FormatterClient = _client(runner, print_width=60)
    outcome: FormatOutcome = client.format_sync_outcome(OBJ_TYPE)

    assert outcome.text == OBJ_TYPE
    assert outcome.error == (
        "Formatting failed (exit=2)\n"
        "cmd: fake-prettier --print-width 60 --parser typescript\n"
        "stderr: SyntaxError: oops\n"
        "stdout: (empty)"
    )
    assert client.cache.get(OBJ_TYPE) is None


def test_format_sync_empty_output_is_failure() -> None:
    """Exit 0 without output counts as a failure."""
    runner = FakeRunner(stdout="")
    outcome: FormatOutcome = _client(runner).format_sync_outcome(OBJ_TYPE)
    assert outcome.text == OBJ_TYPE
    assert outcome.error is not None
    assert outcome.error.startswith("Formatting failed (exit=0)")


def test_format_sync_start_failure() -> None:
    """A spawn error degrades to the original content."""
    runner = FakeRunner(start_error=FileNotFoundError(2, "No such file"))
    outcome: FormatOutcome = _client(runner).format_sync_outcome(OBJ_TYPE)
    assert outcome == FormatOutcome(OBJ_TYPE, "Failed to start prettier job")


def test_format_sync_timeout() -> None:
    """The blocking path honors ``timeout_ms`` as well."""
    runner = FakeRunner(sync_timeout=True)
    outcome: FormatOutcome = _client(runner).format_sync_outcome(OBJ_TYPE)
    assert outcome == FormatOutcome(OBJ_TYPE, "Prettier timed out")


def test_prettierd_receives_filename_hint() -> None:
    """prettierd is invoked with ``stdin.ts`` only."""
    runner = FakeRunner()
    client: FormatterClient = _client(runner, formatter_cmd="/mason/bin/prettierd")
    client.format_sync(OBJ_TYPE)
    assert runner.calls[0][0] == ("/mason/bin/prettierd", "stdin.ts")


def test_ellipsis_is_restored_in_output() -> None:
    """Truncation markers survive a formatting round."""
    runner = FakeRunner()
    client: FormatterClient = _client(runner)
    content = "{ a: string; b: number; ...; z: boolean }"
    result: str = client.format_sync(content)
    assert "__TS_ELLIPSIS__" in runner.calls[0][1]
    assert result == "{\n  a: string;\n  b: number;\n  ...;\n  z: boolean;\n}"


def test_shared_cache_is_used() -> None:
    """An injected cache is shared with the caller."""
    cache = FormatCache()
    cache.set(OBJ_TYPE, "cached!")
    runner = FakeRunner()
    client = FormatterClient(make_config(formatter_cmd="x"), cache=cache, runner=runner)
    assert client.format_sync(OBJ_TYPE) == "cached!"
    assert runner.calls == []


def test_format_sync_accepts_lone_surrogate() -> None:
    """A type containing an unpaired surrogate is formatted, not raised on."""
    content = "{ a: string; b: number; c: \ud800 }"
    client: FormatterClient = _client(FakeRunner())

    assert client.format_sync(content) == "{\n  a: string;\n  b: number;\n  c: \ud800;\n}"
    assert client.cache.get(content) is not None
