"""Console sink for printing results."""

import json
import logging
import sys
from typing import Any, TextIO

from enroll_advisor.sinks.serialization import to_wire

logger = logging.getLogger(__name__)


class ConsoleSink:
    """Output results to a text stream (stdout by default) as JSON."""

    def __init__(self, pretty: bool = True, stream: TextIO | None = None) -> None:
        """Initialize console sink.

        Parameters
        ----------
        pretty : bool
            Pretty-print JSON output.
        stream : TextIO | None
            Destination stream (None for stdout).
        """
        self.pretty = pretty
        self.stream = stream
        self._counts: dict[str, int] = {}

    def write(self, name: str, result: Any) -> None:
        """Write one result as a JSON document."""
        stream = self.stream or sys.stdout
        data = to_wire(result)
        if self.pretty:
            stream.write(json.dumps(data, indent=2, ensure_ascii=False) + "\n")
        else:
            stream.write(json.dumps(data, ensure_ascii=False) + "\n")
        self._counts[name] = self._counts.get(name, 0) + 1

    def close(self) -> None:
        """Flush the stream and log how many results were written per name."""
        (self.stream or sys.stdout).flush()
        for name, count in self._counts.items():
            logger.info("Console output: %s x%d", name, count)
