"""JSON file sink for exporting results to files."""

import json
import logging
from pathlib import Path
from typing import Any

from enroll_advisor.sinks.serialization import to_wire

logger = logging.getLogger(__name__)


class JsonFileSink:
    """Output results to JSON files, one ``<name>.json`` per result."""

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

    def write(self, name: str, result: Any) -> Path:
        """Write one result to ``<output_dir>/<name>.json`` and return the path."""
        file_path = self.output_dir / f"{name}.json"
        data = to_wire(result)

        with open(file_path, "w", encoding="utf-8") as f:
            if self.pretty:
                json.dump(data, f, indent=2, ensure_ascii=False)
            else:
                json.dump(data, f, ensure_ascii=False)

        self._written.append(file_path)
        return file_path

    def close(self) -> None:
        """Log a summary of written files."""
        logger.info("JSON files written to: %s", self.output_dir)
        for path in self._written:
            logger.info("  %s", path.name)
