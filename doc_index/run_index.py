"""Orchestration logic for indexing scanner facts and printing the result."""

import argparse
import logging
import sys
from dataclasses import asdict

import yaml

from doc_index.build_reference_targets import build_reference_targets
from doc_index.build_symbol_index import build_symbol_index
from doc_index.dump_index import dump_index
from doc_index.load_config import load_config

logger = logging.getLogger(__name__)


def run_index(args: argparse.Namespace) -> int:
    """Execute the indexing pipeline."""
    config = load_config(args.config)
    logging.basicConfig(
        level=config["logging"]["level"],
        format="%(levelname)s %(name)s: %(message)s",
    )

    fact_files = sorted(args.facts_dir.rglob("*.yml"))
    if not fact_files:
        msg = f"No .yml files found under: {args.facts_dir}"
        raise SystemExit(msg)

    builder = build_symbol_index(fact_files, config)
    elements = builder.finish()

    if args.targets:
        targets = build_reference_targets(elements)
        output: object = {
            symbol: [
                {k: v for k, v in asdict(t).items() if v is not None}
                for t in symbol_targets
            ]
            for symbol, symbol_targets in targets.items()
        }
    else:
        output = {
            "index": dump_index(elements),
            "classes": {
                file: {
                    name: sorted(registry.parents_of(name))
                    for name in sorted(registry.classes())
                }
                for file, registry in sorted(builder.class_files.items())
            },
        }

    yaml.safe_dump(output, sys.stdout, sort_keys=False, allow_unicode=True)
    return 0
