"""Console output that respects quiet/verbose modes."""

from __future__ import annotations

import sys

from wordsampler.sampler import MISSING


class Console:
    """Status lines for the CLI. Words go to stdout; everything here defaults to stderr."""

    def __init__(self, quiet: bool = False, verbose: bool = False):
        self._quiet = quiet
        self._verbose = verbose

    def _emit(self, message: str, file) -> None:
        print(message, file=file if file is not None else sys.stderr)

    def info(self, message: str, file=None) -> None:
        """Progress and shortfall notes; silenced by --quiet."""
        if not self._quiet:
            self._emit(message, file)

    def error(self, message: str, file=None) -> None:
        """Always shown."""
        self._emit(message, file)

    def debug(self, message: str, file=None) -> None:
        """Only shown with --verbose."""
        if self._verbose:
            self._emit(message, file)

    def diagnostics(self, diagnostics, file=None) -> None:
        """Report sources that contributed no words."""
        for d in diagnostics:
            if d.kind == MISSING:
                self.info(f"warning: {d.message}", file=file)
            else:
                self.error(f"error: {d.message}", file=file)
