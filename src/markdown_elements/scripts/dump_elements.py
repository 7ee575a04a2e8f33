"""Dump the parsed elements of a Markdown file as JSON.

Usage:
  poetry run python -m markdown_elements.scripts.dump_elements PATH [--counter-ids]

Env:
  MARKDOWN_ELEMENTS_ID_STRATEGY (optional, overridden by --counter-ids)
"""

from __future__ import annotations

import json
import sys
from pathlib import Path

from ..services.ids import make_id_factory
from ..services.markdown_parser import parse_markdown_elements


def main(argv: list[str] | None = None) -> None:
    args = list(sys.argv[1:] if argv is None else argv)
    counter = "--counter-ids" in args
    paths = [a for a in args if a != "--counter-ids"]
    if len(paths) != 1:
        raise SystemExit("Usage: dump_elements PATH [--counter-ids]")

    md_path = Path(paths[0])
    if not md_path.exists():
        raise SystemExit(f"File not found: {md_path}")

    ids = make_id_factory("counter" if counter else None)
    elements = parse_markdown_elements(md_path.read_text(encoding="utf-8"), ids)
    payload = [el.model_dump(mode="json") for el in elements]
    print(json.dumps(payload, ensure_ascii=False, indent=2))


if __name__ == "__main__":
    main()
