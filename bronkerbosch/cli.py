"""Find maximal and maximum cliques of a graph-definition file.

Run:
  python -m bronkerbosch graphs/graph01.txt true false
  bronkerbosch graphs/graph01.txt false true --quiet --output reports/graph01.json
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from bronkerbosch.analysis.report import build_report
from bronkerbosch.core.cli_utils import add_variant_flags, create_base_parser, log_level
from bronkerbosch.core.config import configure_logging
from bronkerbosch.io import GraphLoaderError, load_graph, write_json
from bronkerbosch.output.sinks import LoggingOutputSink, OutputSink, StreamOutputSink
from bronkerbosch.search.engine import BronKerbosch, format_cliques

LOGGER = logging.getLogger("bronkerbosch.cli")


def _parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = create_base_parser(
        "Enumerate maximal cliques with the Bron-Kerbosch algorithm and report the maximum ones."
    )
    parser.add_argument("graph", type=Path, help="Path to a .txt graph-definition file.")
    add_variant_flags(parser)
    parser.add_argument(
        "--quiet",
        action="store_true",
        help="Send algorithm trace lines to the DEBUG log instead of stdout.",
    )
    parser.add_argument(
        "--output",
        type=Path,
        default=None,
        help="Write a JSON report of the run to this path.",
    )
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    args = _parse_args(argv)
    configure_logging(log_level(args))

    try:
        graph = load_graph(args.graph)
    except GraphLoaderError as exc:
        LOGGER.error("Could not load graph %s: %s", args.graph, exc)
        return 1

    sink: OutputSink[str] = LoggingOutputSink() if args.quiet else StreamOutputSink()
    engine = BronKerbosch(graph, args.degeneracy, args.pivot, sink)
    engine.run()

    print("Result:")
    print(format_cliques(sink.get_maximum_cliques()))

    if args.output is not None:
        report = build_report(engine, source=str(args.graph))
        write_json(report.model_dump(), args.output)
        LOGGER.info("Wrote %s", args.output)
    return 0


if __name__ == "__main__":
    sys.exit(main())
