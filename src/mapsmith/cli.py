"""Command-line interface for MapSmith."""

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import Any, Optional

from pydantic import BaseModel, Field, ValidationError

from .config import settings
from .mapping import (
    DatasetAnalysis,
    TemplateAnalysis,
    TemplateVariablePlaceholder,
    auto_apply_mappings,
    detect_phone_columns,
    generate_suggestions,
    validate_csv_structure,
    validate_mapping,
    validate_phone_column,
    validate_preview_data,
)
from .placeholders import PlaceholderSource, build_preview_rows, substitute_template_text

logger = logging.getLogger(__name__)

LOG_LEVELS = ["CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG"]


class MappingDocument(BaseModel):
    """JSON input shared by all commands."""

    placeholders: list[TemplateVariablePlaceholder] = Field(default_factory=list)
    dataset: DatasetAnalysis = Field(default_factory=DatasetAnalysis)
    mapping: dict[int, str] = Field(default_factory=dict)
    phone_column: Optional[str] = None
    rows: list[dict[str, Any]] = Field(default_factory=list)
    text: Optional[str] = None
    sample_values: dict[str, str] = Field(default_factory=dict)
    user_values: dict[str, str] = Field(default_factory=dict)
    mappings: dict[str, PlaceholderSource] = Field(default_factory=dict)


def load_document(path: str) -> MappingDocument:
    """Load a mapping document from a JSON file, or stdin for '-'."""
    raw = sys.stdin.read() if path == "-" else Path(path).read_text(encoding="utf-8")
    doc = MappingDocument.model_validate_json(raw)
    logger.debug(
        f"Loaded {len(doc.placeholders)} placeholders and {len(doc.dataset.columns)} columns"
    )
    return doc


def _dump(payload: Any) -> None:
    print(json.dumps(payload, indent=2, default=str))


def run_suggest(doc: MappingDocument, threshold: Optional[float]) -> int:
    """Print ranked suggestions and the auto-applied mapping."""
    suggestions = generate_suggestions(doc.placeholders, doc.dataset)
    mapping = auto_apply_mappings(doc.placeholders, suggestions, threshold)
    _dump(
        {
            "suggestions": {
                str(index): [s.model_dump(mode="json") for s in ranked]
                for index, ranked in suggestions.items()
            },
            "mapping": {str(k): v for k, v in mapping.items()},
        }
    )
    return 0


def run_phone(doc: MappingDocument) -> int:
    """Print phone column candidates and check the selected one."""
    suggestions = detect_phone_columns(doc.dataset.columns, doc.dataset)
    payload: dict[str, Any] = {
        "suggestions": [s.model_dump(mode="json") for s in suggestions]
    }
    if doc.phone_column is not None:
        check = validate_phone_column(doc.phone_column, doc.dataset.columns, suggestions)
        payload["selection"] = check.model_dump(mode="json")
    _dump(payload)
    return 0


def run_validate(doc: MappingDocument) -> int:
    """Validate the document's mapping and dataset shape; exit 2 when invalid."""
    template = TemplateAnalysis(
        variable_count=len(doc.placeholders), variables=doc.placeholders
    )
    structure = validate_csv_structure(doc.dataset, template)
    result = validate_mapping(
        doc.mapping, doc.placeholders, doc.dataset.columns, doc.dataset
    )
    payload = {
        "structure": structure.model_dump(mode="json"),
        "mapping": result.model_dump(mode="json"),
    }
    if doc.rows and doc.text:
        rows = build_preview_rows(doc.text, doc.mapping, doc.phone_column, doc.rows)
        payload["preview"] = validate_preview_data(rows).model_dump(mode="json")
    _dump(payload)
    return 0 if result.is_valid and structure.is_valid else 2


def run_preview(doc: MappingDocument, text: Optional[str]) -> int:
    """Print the template text with placeholders substituted."""
    print(
        substitute_template_text(
            text if text is not None else doc.text,
            sample_values=doc.sample_values,
            mappings=doc.mappings,
            user_values=doc.user_values,
        )
    )
    return 0


def main():
    """Main entry point for the CLI."""
    parser = argparse.ArgumentParser(
        description="MapSmith - map table columns to message template placeholders"
    )
    parser.add_argument(
        "--log-level",
        type=str.upper,
        choices=LOG_LEVELS,
        default=settings.log_level,
        help="Logging level (default: from settings)",
    )
    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    suggest_parser = subparsers.add_parser("suggest", help="Suggest and auto-apply mappings")
    suggest_parser.add_argument("document", help="JSON mapping document ('-' for stdin)")
    suggest_parser.add_argument(
        "--threshold",
        type=float,
        default=None,
        help=f"Auto-apply threshold (default: {settings.auto_apply_threshold:g})",
    )

    phone_parser = subparsers.add_parser("phone", help="Detect the phone number column")
    phone_parser.add_argument("document", help="JSON mapping document ('-' for stdin)")

    validate_parser = subparsers.add_parser("validate", help="Validate a mapping")
    validate_parser.add_argument("document", help="JSON mapping document ('-' for stdin)")

    preview_parser = subparsers.add_parser("preview", help="Render a template preview")
    preview_parser.add_argument("document", help="JSON mapping document ('-' for stdin)")
    preview_parser.add_argument("--text", help="Template text (overrides the document's)")

    args = parser.parse_args()

    logging.basicConfig(
        level=args.log_level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    if args.command is None:
        parser.print_help()
        sys.exit(1)

    try:
        doc = load_document(args.document)
    except (OSError, ValidationError) as e:
        print(f"Could not load document: {e}", file=sys.stderr)
        sys.exit(1)

    if args.command == "suggest":
        sys.exit(run_suggest(doc, args.threshold))
    elif args.command == "phone":
        sys.exit(run_phone(doc))
    elif args.command == "validate":
        sys.exit(run_validate(doc))
    elif args.command == "preview":
        sys.exit(run_preview(doc, args.text))


if __name__ == "__main__":
    main()
