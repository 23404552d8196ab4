from __future__ import annotations

import json
import sys
from pathlib import Path

from binding_kernel.observability.records import BindingTimingRecord
from binding_kernel.ports.timing_sink import TimingSink


class StdoutTimingSink(TimingSink):
    # Prints the summary line for each record.
    def emit(self, record: BindingTimingRecord) -> None:
        sys.stdout.write(record.summary + "\n")

    def flush(self) -> None:
        sys.stdout.flush()

    def close(self) -> None:
        self.flush()


class JsonlTimingSink(TimingSink):
    # One compact JSON object per record, appended to a file.
    def __init__(self, path: Path) -> None:
        self._path = path
        self._path.parent.mkdir(parents=True, exist_ok=True)
        self._file = self._path.open("a", encoding="utf-8")

    def emit(self, record: BindingTimingRecord) -> None:
        self._file.write(json.dumps(record.to_dict(), separators=(",", ":"), ensure_ascii=False) + "\n")

    def flush(self) -> None:
        self._file.flush()

    def close(self) -> None:
        if not self._file.closed:
            self._file.flush()
            self._file.close()
