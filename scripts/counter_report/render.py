"""Render a COUNTER element from a YAML or JSON data file as an XML document.

Reads loosely structured element data, builds the requested element through
the element registry (so every constructor check runs), and writes the XML.

Configuration (CLI args take precedence over env vars):
    --element     Element to build  (env: COUNTER_ELEMENT,   default: "ReportItems")
    --log-level   Logging level     (env: COUNTER_LOG_LEVEL, default: "WARNING")
    --output      Output file       (default: stdout)

Usage:
    counter-render item.yaml
    counter-render --element Instance - <<< '{"ft_pdf": 5}'
    COUNTER_ELEMENT=ParentItem counter-render parent.json --output parent.xml

Exit codes: 0 = rendered, 1 = data rejected by the element model,
2 = file or YAML/JSON parse error.
"""

from __future__ import annotations

import argparse
import logging
import os
import sys
from pathlib import Path
from typing import Any

import yaml

from counter_report.errors import CounterError
from counter_report.registry import REGISTRY, build_element

logger = logging.getLogger(__name__)

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR")


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse CLI arguments with environment variable fallbacks.

    Priority (highest → lowest):
        1. Explicit CLI flag (e.g. --element Instance)
        2. Environment variable (e.g. COUNTER_ELEMENT=Instance)
        3. Built-in default ("ReportItems", "WARNING")

    Args:
        argv: Argument list to parse. If None, reads from sys.argv[1:].

    Returns:
        Parsed namespace with .input, .element, .output, .log_level.

    Exits with status 2 (argparse usage error) when COUNTER_LOG_LEVEL names an
    unknown level.
    """
    parser = argparse.ArgumentParser(
        prog="counter-render",
        description="Render COUNTER 4.1 element data (YAML or JSON) as XML.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=(
            "Environment variables:\n"
            "  COUNTER_ELEMENT    Element to build (default: 'ReportItems')\n"
            "  COUNTER_LOG_LEVEL  Logging level    (default: 'WARNING')\n\n"
            f"Elements: {', '.join(REGISTRY.names())}\n"
        ),
    )
    parser.add_argument(
        "input",
        help="YAML or JSON file holding the element data ('-' reads stdin)",
    )
    parser.add_argument(
        "--element",
        default=os.environ.get("COUNTER_ELEMENT", "ReportItems"),
        metavar="NAME",
        help="XML name of the element to build (env: COUNTER_ELEMENT, default: 'ReportItems')",
    )
    parser.add_argument(
        "--output",
        type=Path,
        default=None,
        metavar="PATH",
        help="Write the document here instead of stdout",
    )
    parser.add_argument(
        "--log-level",
        default=os.environ.get("COUNTER_LOG_LEVEL", "WARNING"),
        choices=LOG_LEVELS,
        type=str.upper,
        help="Logging level (env: COUNTER_LOG_LEVEL, default: 'WARNING')",
    )
    args = parser.parse_args(argv)
    # argparse checks choices on explicit flags only, never on env-derived defaults.
    if args.log_level not in LOG_LEVELS:
        parser.error(
            f"COUNTER_LOG_LEVEL must be one of {', '.join(LOG_LEVELS)}, "
            f"got {os.environ.get('COUNTER_LOG_LEVEL')!r}"
        )
    return args


def load_data(source: str) -> Any:
    """Read and decode element data from a path, or from stdin when source is '-'.

    The raw bytes go to PyYAML, which detects the encoding and reports bad
    bytes as a yaml.YAMLError.

    Raises:
        OSError: The file cannot be read.
        yaml.YAMLError: The content is neither valid YAML nor JSON.
    """
    if source == "-":
        return yaml.safe_load(sys.stdin.buffer)
    with open(source, "rb") as f:
        return yaml.safe_load(f)


def render(element: str, data: Any) -> str:
    """Build element from data and return its XML document as a string."""
    built = build_element(element, data)
    logger.info("Built <%s> element", element)
    return built.to_xml()


def main(argv: list[str] | None = None) -> int:
    """CLI entry point. Returns exit code: 0=rendered, 1=invalid data, 2=file/parse error."""
    args = parse_args(argv)
    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(asctime)s %(levelname)s %(name)s %(message)s",
    )

    try:
        data = load_data(args.input)
    except OSError as e:
        print(f"Error: cannot read {args.input}: {e}", file=sys.stderr)
        return 2
    except yaml.YAMLError as e:
        print(f"Error: {args.input} is not valid YAML/JSON: {e}", file=sys.stderr)
        return 2

    try:
        content = render(args.element, data)
    except CounterError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    if args.output is None:
        sys.stdout.write(content + "\n")
        return 0
    try:
        args.output.write_text(content + "\n", encoding="UTF-8")
    except OSError as e:
        print(f"Error writing {args.output}: {e}", file=sys.stderr)
        return 2
    logger.info("Wrote %s (%d bytes)", args.output, len(content) + 1)
    return 0


if __name__ == "__main__":
    sys.exit(main())
