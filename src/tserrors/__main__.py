# topmark:header:start
#
#   project      : TSErrors
#   file         : __main__.py
#   file_relpath : src/tserrors/__main__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Module entry point for running TSErrors via ``python -m tserrors``.

Delegates directly to :func:`tserrors.cli.main.cli`, so the module form and the
``tserrors`` console script share a single entry point.

Examples:
    Prettify a diagnostic read from STDIN::

        echo "Type '...' is not assignable to type 'Foo'" | python -m tserrors show -
"""

from __future__ import annotations

from tserrors.cli.main import cli

if __name__ == "__main__":
    # We call the Click group directly
    cli()
