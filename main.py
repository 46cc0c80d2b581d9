"""Entry point for indexing scanner facts and dumping the symbol index."""

import argparse
from pathlib import Path

from doc_index.run_index import run_index


def main() -> int:
    """Parse arguments and run the indexing pipeline."""
    parser = argparse.ArgumentParser(
        description=(
            "Merge scanner fact YAML files into the collapsed symbol index and "
            "print it as YAML."
        ),
    )
    parser.add_argument(
        "facts_dir",
        type=Path,
        help="Directory containing *.yml fact files",
    )
    parser.add_argument(
        "--config",
        help="Path to configuration file",
    )
    parser.add_argument(
        "--targets",
        action="store_true",
        help="Print the flat list of reference targets per symbol instead",
    )
    args = parser.parse_args()
    return run_index(args)


if __name__ == "__main__":
    raise SystemExit(main())
