"""Append-only result sinks receiving one record per processed page."""

import json
from pathlib import Path
from typing import IO, List, Optional, Protocol, Union

from chunkwise.models.page import PageRecord


class ResultSink(Protocol):
    def open(self) -> None: ...

    def push(self, record: PageRecord) -> None: ...

    def close(self) -> None: ...


class ListSink:
    """Keeps pushed records in memory, in push order."""

    def __init__(self) -> None:
        self.records: List[PageRecord] = []

    def open(self) -> None:
        pass

    def push(self, record: PageRecord) -> None:
        self.records.append(record)

    def close(self) -> None:
        pass


class JsonLinesSink:
    """Appends each record as one JSON object per line to *path* (UTF-8)."""

    def __init__(self, path: Union[str, Path]) -> None:
        self.path = Path(path)
        self._file: Optional[IO[str]] = None

    def open(self) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        self._file = self.path.open("a", encoding="utf-8")

    def push(self, record: PageRecord) -> None:
        if self._file is None:
            raise RuntimeError("Sink is not open.")
        self._file.write(json.dumps(record.to_dict(), ensure_ascii=False) + "\n")
        self._file.flush()

    def close(self) -> None:
        if self._file is not None:
            self._file.close()
            self._file = None
