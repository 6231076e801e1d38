"""
Command line entry point.

    appdocs generate --store applications.json --id <uuid> --output out.pdf

Presentation settings come from APPDOCS_* environment variables
(see appdocs.config.settings).
"""

import argparse
import json
import logging
import sys
from pathlib import Path
from uuid import UUID

from pydantic import ValidationError

from appdocs.adapters import (
    JinjaMarkupRenderer,
    JsonApplicationStore,
    MappingTemplatePathProvider,
    WeasyPrintDocumentRenderer,
)
from appdocs.config import PresentationConfig
from appdocs.documents import DocumentAssembler, DocumentError

logger = logging.getLogger("appdocs")

DEFAULT_TEMPLATE_DIR = Path(__file__).parent / "templates"


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="appdocs", description="Generate application documents")
    parser.add_argument("--verbose", "-v", action="store_true", help="Enable debug logging")
    subparsers = parser.add_subparsers(dest="command", required=True)

    generate = subparsers.add_parser("generate", help="Render the PDF for one application")
    generate.add_argument("--store", required=True, type=Path, help="JSON file of application records")
    generate.add_argument("--id", required=True, type=UUID, dest="application_id", help="Application id")
    generate.add_argument(
        "--base-uri",
        default=str(DEFAULT_TEMPLATE_DIR) + "/",
        help="Template directory or file:// URI (default: bundled templates)",
    )
    generate.add_argument("--output", "-o", type=Path, help="Output file (default: <id>.pdf)")
    return parser


def generate(args: argparse.Namespace) -> int:
    try:
        settings = PresentationConfig()
    except ValidationError as e:
        print(f"Invalid APPDOCS_* configuration: {e}", file=sys.stderr)
        return 2

    try:
        store = JsonApplicationStore(args.store)
    except (OSError, json.JSONDecodeError) as e:
        print(f"Cannot read application store {args.store}: {e}", file=sys.stderr)
        return 2
    except DocumentError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 2

    try:
        assembler = DocumentAssembler(
            store=store,
            template_path_provider=MappingTemplatePathProvider(),
            markup_renderer=JinjaMarkupRenderer(),
            document_renderer=WeasyPrintDocumentRenderer(),
            settings=settings,
            logger=logger,
        )
        result = assembler.assemble(args.application_id, args.base_uri)
    except DocumentError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 2

    if not result.has_document:
        print(f"No document generated: {result.details}", file=sys.stderr)
        return 1

    output = args.output or Path(f"{args.application_id}.pdf")
    output.write_bytes(result.document)
    print(f"Wrote {output} ({len(result.document)} bytes)")
    return 0


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    if args.command == "generate":
        return generate(args)
    return 2


if __name__ == "__main__":
    sys.exit(main())
