"""JSON file sink for exporting reports."""

import json
import logging
from pathlib import Path

from bank_ledger.reporting import BankReport
from bank_ledger.sinks.serialization import report_to_dict

logger = logging.getLogger(__name__)


class JsonFileSink:
    """Output reports to JSON files."""

    def __init__(self, output_dir: str | Path, pretty: bool = False) -> None:
        """Initialize JSON file sink.

        Parameters
        ----------
        output_dir : str | Path
            Directory to write JSON files.
        pretty : bool
            Pretty-print JSON output.
        """
        self.output_dir = Path(output_dir)
        self.output_dir.mkdir(parents=True, exist_ok=True)
        self.pretty = pretty
        self._written: list[Path] = []

    def write_report(self, report: BankReport, filename: str = "report.json") -> Path:
        """Write the report to ``output_dir / filename`` and return the path."""
        file_path = self.output_dir / filename
        data = report_to_dict(report)

        with open(file_path, "w", encoding="utf-8") as f:
            if self.pretty:
                json.dump(data, f, indent=2, ensure_ascii=False)
            else:
                json.dump(data, f, ensure_ascii=False)

        self._written.append(file_path)
        logger.info("Report written to %s", file_path)
        return file_path

    def close(self) -> None:
        """Log the files written by this sink."""
        for path in self._written:
            logger.debug("Exported %s", path)
