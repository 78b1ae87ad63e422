"""Entry-point for the YOOtheme layout interchange pipeline."""
from __future__ import annotations

import argparse
import json
from pathlib import Path
from typing import Any, Dict, List, Optional, Sequence

from layout_interchange.model.document_model import ExportResult
from layout_interchange.model.elements import PageInfo, StoredElement
from layout_interchange.parser.flattener import batch_to_dicts, flatten_elements, import_from_yootheme_flat
from layout_interchange.parser.layout_loader import LayoutSource
from layout_interchange.parser.tree_transformer import import_from_yootheme
from layout_interchange.parser.validator import is_valid_layout
from layout_interchange.renderer.exporter import export_project_to_yootheme, export_to_yootheme
from layout_interchange.utils.debug import DebugDumper
from layout_interchange.utils.json_utils import dumps, read_json_text, write_json
from layout_interchange.utils.logger import get_logger

LOGGER = get_logger(__name__)

__all__ = [
    "export_project_to_yootheme",
    "export_to_yootheme",
    "import_from_yootheme",
    "import_from_yootheme_flat",
    "is_valid_layout",
    "run_export",
    "run_import",
]


def run_import(layout_path: Path, *, nested: bool = False, debug_dir: Optional[Path] = None) -> List[Dict[str, object]]:
    """Load a YOOtheme layout file and return the native batch as JSON-ready dicts."""
    layout = LayoutSource.from_path(layout_path).to_layout()
    tree = import_from_yootheme(layout)
    batch = flatten_elements(tree)
    LOGGER.info("Imported %d element(s) from %s", len(batch), layout_path.name)

    if debug_dir is not None:
        DebugDumper(debug_dir).dump({"foreign_layout": layout, "native_tree": tree, "flat_batch": batch})

    if nested:
        return [element.to_dict() for element in tree]
    return batch_to_dicts(batch)


def run_export(elements_path: Path, *, slug: Optional[str] = None, debug_dir: Optional[Path] = None) -> ExportResult:
    """Read stored elements for one page and build its YOOtheme document.

    The file holds either a bare array of element rows or an object with
    ``elements`` and an optional ``page`` (``id``, ``name``, ``slug``).
    """
    payload = _read_json(elements_path)
    page_payload: Dict[str, Any] = {}
    rows = payload
    if isinstance(payload, dict):
        page_payload = payload.get("page") or {}
        rows = payload.get("elements") or []
    if not isinstance(rows, list):
        raise ValueError(f"Expected a list of elements in {elements_path.name}")
    if not isinstance(page_payload, dict) or not all(isinstance(row, dict) for row in rows):
        raise ValueError(f"Page and element rows in {elements_path.name} must be JSON objects")

    elements = [StoredElement.from_dict(row) for row in rows]
    page = PageInfo(
        id=int(page_payload.get("id") or 0),
        name=str(page_payload.get("name") or ""),
        slug=slug or page_payload.get("slug"),
    )
    result = export_to_yootheme(page, elements)

    if debug_dir is not None:
        DebugDumper(debug_dir).dump({"stored_elements": elements, "foreign_layout": result.layout})
    return result


def _read_json(path: Path) -> Any:
    text = read_json_text(path)
    try:
        return json.loads(text)
    except json.JSONDecodeError as exc:
        raise ValueError(f"{path.name} is not valid JSON: {exc.msg}") from exc


def build_arg_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Convert between YOOtheme Pro layouts and builder elements")
    commands = parser.add_subparsers(dest="command", required=True)

    import_cmd = commands.add_parser("import", help="YOOtheme layout JSON -> flattened builder elements")
    import_cmd.add_argument("layout_file", help="Path to the YOOtheme layout JSON")
    import_cmd.add_argument("--output", help="File to write the element batch to (default: stdout)")
    import_cmd.add_argument("--nested", action="store_true", help="Emit the nested tree instead of the flat batch")
    import_cmd.add_argument("--debug", help="Directory to write intermediate artifacts to")

    export_cmd = commands.add_parser("export", help="Stored builder elements JSON -> YOOtheme layout")
    export_cmd.add_argument("elements_file", help="Path to the page's element rows")
    export_cmd.add_argument("--slug", help="Page slug used for the suggested file name")
    export_cmd.add_argument("--output", help="File to write the layout to (default: suggested name)")
    export_cmd.add_argument("--debug", help="Directory to write intermediate artifacts to")
    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run the CLI; returns a process exit code."""
    args = build_arg_parser().parse_args(argv)
    debug_dir = Path(args.debug).resolve() if args.debug else None

    try:
        if args.command == "import":
            batch = run_import(Path(args.layout_file).resolve(), nested=args.nested, debug_dir=debug_dir)
            if args.output:
                write_json(Path(args.output), batch)
            else:
                print(dumps(batch))
        else:
            elements_path = Path(args.elements_file).resolve()
            result = run_export(elements_path, slug=args.slug, debug_dir=debug_dir)
            output_path = Path(args.output) if args.output else elements_path.parent / result.filename
            write_json(output_path, result.layout.to_dict())
            LOGGER.info("Wrote %s", output_path)
    except (ValueError, KeyError, FileNotFoundError) as exc:
        LOGGER.error("%s", exc)
        return 1
    return 0


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
