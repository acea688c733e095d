"""Maximal and maximum clique enumeration with the Bron-Kerbosch algorithm."""

from __future__ import annotations

from bronkerbosch.graph.view import GraphView, NetworkxGraphView
from bronkerbosch.io import GraphFormatError, GraphLoaderError, GraphReadError, load_graph
from bronkerbosch.output.sinks import (
    LoggingOutputSink,
    MemoryOutputSink,
    OutputSink,
    StreamOutputSink,
)
from bronkerbosch.search.engine import BronKerbosch, ConfigurationError, SearchStats

__version__ = "0.1.0"

__all__ = [
    "BronKerbosch",
    "ConfigurationError",
    "SearchStats",
    "GraphView",
    "NetworkxGraphView",
    "load_graph",
    "GraphLoaderError",
    "GraphFormatError",
    "GraphReadError",
    "OutputSink",
    "StreamOutputSink",
    "MemoryOutputSink",
    "LoggingOutputSink",
]
