"""Loader for line-oriented graph-definition text files.

Format::

    ## comment lines and blank lines are ignored anywhere
    %Vertices%
    a b c
    d
    %Connections%
    a-b b-c
    c-d

Vertex lines hold whitespace-separated names; connection lines hold
whitespace-separated `origin-destination` tokens between declared vertices.
A graph is returned only if the whole file parses; any failure raises.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from enum import IntEnum
from pathlib import Path

import networkx as nx

from bronkerbosch.core.config import (
    COMMENT_PREFIX,
    CONNECTIONS_MARKER,
    EDGE_SEPARATOR,
    SUPPORTED_EXTENSION,
    VERTICES_MARKER,
)

LOGGER = logging.getLogger(__name__)


class GraphLoaderError(Exception):
    """A graph-definition file could not be loaded."""


class GraphFormatError(GraphLoaderError):
    """The file content (or file type) does not follow the graph-definition format."""

    def __init__(self, reason: str, *, line: int | None = None) -> None:
        self.reason = reason
        self.line = line
        super().__init__(reason if line is None else f"line {line}: {reason}")


class GraphReadError(GraphLoaderError):
    """The file could not be read (missing, not a regular file, OS or decoding error)."""


class _Section(IntEnum):
    PREAMBLE = 0
    VERTICES = 1
    CONNECTIONS = 2


def file_extension(name: str) -> str | None:
    """Everything after the first dot of a file name, or None if there is none."""
    _, dot, ext = name.partition(".")
    if not dot or not ext:
        return None
    return ext


def _parse_edge(token: str, G: nx.Graph, *, line: int) -> tuple[str, str]:
    parts = token.split(EDGE_SEPARATOR)
    if len(parts) != 2 or not all(parts):
        raise GraphFormatError(f"Malformed connection definition: {token!r}", line=line)
    u, v = parts
    unknown = [x for x in (u, v) if x not in G]
    if unknown:
        raise GraphFormatError(
            f"Connection {token!r} references undeclared vertex(es): {unknown}", line=line
        )
    if u == v:
        raise GraphFormatError(f"Self-loop connection is not allowed: {token!r}", line=line)
    return u, v


def parse_graph_definition(lines: Iterable[str]) -> nx.Graph:
    """Parse graph-definition lines into an undirected graph of string vertices."""
    G = nx.Graph()
    section = _Section.PREAMBLE

    for i, raw in enumerate(lines, start=1):
        text = raw.strip()
        if not text or text.startswith(COMMENT_PREFIX):
            continue

        if text == VERTICES_MARKER:
            if section == _Section.CONNECTIONS:
                raise GraphFormatError("Vertices declared after connections began.", line=i)
            section = _Section.VERTICES
        elif text == CONNECTIONS_MARKER:
            if section != _Section.VERTICES:
                raise GraphFormatError(
                    f"{CONNECTIONS_MARKER} must follow a {VERTICES_MARKER} block.", line=i
                )
            section = _Section.CONNECTIONS
        elif section == _Section.VERTICES:
            G.add_nodes_from(text.split())
        elif section == _Section.CONNECTIONS:
            G.add_edges_from([_parse_edge(token, G, line=i) for token in text.split()])
        else:
            raise GraphFormatError(
                f"Graph definition file malformed: expected {VERTICES_MARKER} first.", line=i
            )

    if section != _Section.CONNECTIONS:
        raise GraphFormatError(f"Graph definition file malformed: missing {CONNECTIONS_MARKER}.")
    return G


def load_graph(path: str | Path) -> nx.Graph:
    """Load a `.txt` graph-definition file (UTF-8)."""
    p = Path(path)
    if not p.is_file():
        raise GraphReadError(f"Path does not lead to a file: {p}")
    if file_extension(p.name) != SUPPORTED_EXTENSION:
        raise GraphFormatError(f"Unsupported file type: {p.name!r} (expected .{SUPPORTED_EXTENSION})")

    try:
        text = p.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise GraphReadError(f"Could not read graph definition {p}: {exc}") from exc

    G = parse_graph_definition(text.splitlines())
    LOGGER.info(
        "Loaded graph %s: %d vertices, %d edges", p, G.number_of_nodes(), G.number_of_edges()
    )
    return G
