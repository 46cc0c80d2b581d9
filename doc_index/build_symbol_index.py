"""Logic for building the symbol index from scanner fact files."""

import logging
from pathlib import Path
from typing import Any

from doc_index.index_builder import IndexBuilder
from doc_index.iter_entries import iter_entries
from doc_index.load_fact_document import load_fact_document
from doc_index.symbol_fact import fact_from_dict

logger = logging.getLogger(__name__)


def build_symbol_index(
    fact_files: list[Path],
    config: dict[str, Any] | None = None,
) -> IndexBuilder:
    """Feed every fact, class, and reference entry of the files to a builder."""
    builder = IndexBuilder(config)
    for f in fact_files:
        doc = load_fact_document(f)
        _add_facts(builder, doc, f)
        _add_classes(builder, doc, f)
        for entry in iter_entries(doc, "references"):
            if entry.get("file") and entry.get("reference"):
                builder.add_reference(str(entry["file"]), str(entry["reference"]))
        logger.debug("Loaded facts from %s", f)
    return builder


def _add_facts(builder: IndexBuilder, doc: dict[str, Any], path: Path) -> None:
    for n, entry in enumerate(iter_entries(doc, "facts"), start=1):
        try:
            fact = fact_from_dict(entry)
        except KeyError as e:
            msg = f"{path}: fact #{n} is missing required key {e}"
            raise SystemExit(msg) from e
        if not fact.symbol:
            msg = f"{path}: fact #{n} has an empty symbol"
            raise SystemExit(msg)
        builder.add_fact(fact)


def _add_classes(builder: IndexBuilder, doc: dict[str, Any], path: Path) -> None:
    for entry in iter_entries(doc, "classes"):
        class_name = entry.get("class")
        if not class_name:
            logger.warning("%s: skipping class entry without a name", path)
            continue
        # Class entries default to the fact file itself
        file = str(entry.get("file") or path.as_posix())
        builder.add_class(file, str(class_name))
        parents = entry.get("parents") or []
        if isinstance(parents, str):
            parents = [parents]
        for parent in parents:
            builder.add_parent(file, str(class_name), str(parent))
