"""Output sinks: receivers of trace lines and of the final clique collections.

A sink is passive. The search engine only emits trace strings to it and hands
over the two result collections once a run is complete.
"""

from __future__ import annotations

import logging
import sys
from abc import ABC, abstractmethod
from collections.abc import Hashable, Iterable
from typing import Generic, TextIO, TypeVar

V = TypeVar("V", bound=Hashable)


class OutputSink(ABC, Generic[V]):
    """Base sink: keeps the result collections, leaves trace emission abstract."""

    def __init__(self) -> None:
        self._maximal: tuple[frozenset[V], ...] = ()
        self._maximum: tuple[frozenset[V], ...] = ()

    @abstractmethod
    def emit(self, line: str) -> None:
        """Receive one trace line (no trailing newline)."""

    def set_maximal_cliques(self, cliques: Iterable[frozenset[V]]) -> None:
        if cliques is None:
            raise ValueError("Maximal cliques passed can not be None.")
        self._maximal = tuple(frozenset(c) for c in cliques)

    def set_maximum_cliques(self, cliques: Iterable[frozenset[V]]) -> None:
        if cliques is None:
            raise ValueError("Maximum cliques passed can not be None.")
        self._maximum = tuple(frozenset(c) for c in cliques)

    def get_maximal_cliques(self) -> tuple[frozenset[V], ...]:
        return self._maximal

    def get_maximum_cliques(self) -> tuple[frozenset[V], ...]:
        return self._maximum


class StreamOutputSink(OutputSink[V]):
    """Writes each trace line to a text stream (stdout by default)."""

    def __init__(self, stream: TextIO | None = None) -> None:
        super().__init__()
        self._stream = stream

    def emit(self, line: str) -> None:
        stream = self._stream if self._stream is not None else sys.stdout
        stream.write(line + "\n")


class MemoryOutputSink(OutputSink[V]):
    """Collects trace lines in memory (tests, batch comparison)."""

    def __init__(self, *, keep_trace: bool = True) -> None:
        super().__init__()
        self.keep_trace = keep_trace
        self.lines: list[str] = []

    def emit(self, line: str) -> None:
        if self.keep_trace:
            self.lines.append(line)

    @property
    def text(self) -> str:
        return "\n".join(self.lines)


class LoggingOutputSink(OutputSink[V]):
    """Forwards trace lines to a logger at a fixed level (DEBUG by default)."""

    def __init__(self, logger: logging.Logger | None = None, *, level: int = logging.DEBUG) -> None:
        super().__init__()
        self._logger = logger if logger is not None else logging.getLogger("bronkerbosch.trace")
        self._level = level

    def emit(self, line: str) -> None:
        self._logger.log(self._level, "%s", line)
