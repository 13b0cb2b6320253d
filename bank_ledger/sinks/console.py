"""Console sink printing reports for the interactive shell."""

import logging
from typing import TextIO

from bank_ledger.reporting import BankReport, render_text

logger = logging.getLogger(__name__)


class ConsoleSink:
    """Output reports to a text stream (stdout by default)."""

    def __init__(self, stream: TextIO | None = None) -> None:
        """Initialize console sink.

        Parameters
        ----------
        stream : TextIO | None
            Stream to print to; ``None`` means ``sys.stdout`` at write time.
        """
        self.stream = stream
        self.reports_written = 0

    def write_report(self, report: BankReport) -> None:
        """Print the rendered report."""
        print("\n" + render_text(report), file=self.stream)
        self.reports_written += 1

    def close(self) -> None:
        """Log a summary of printed reports."""
        logger.debug("Console sink printed %d report(s)", self.reports_written)
