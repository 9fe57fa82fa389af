"""Command-line entry point: chunk a text file and print JSON."""

import argparse
import json
import logging
import sys

from smartchunk.chunking.chunker import SmartChunker
from smartchunk.chunking.preview import build_preview
from smartchunk.config import load_config
from smartchunk.loader import read_text_file

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="smartchunk",
        description="Split a plain text document into scored, retrieval-ready chunks.",
    )
    parser.add_argument("path", help="Plain text or Markdown file to chunk")
    parser.add_argument("--config", default="config.yaml", help="YAML configuration file")
    parser.add_argument("--max-chunk-size", type=int, help="Maximum characters per chunk")
    parser.add_argument("--overlap", type=int, help="Characters shared with the previous chunk")
    parser.add_argument(
        "--no-preserve-structure",
        action="store_true",
        help="Ignore Q&A pairs and headers when splitting",
    )
    parser.add_argument(
        "--no-auto-detect",
        action="store_true",
        help="Disable document type detection and adaptive sizing",
    )
    parser.add_argument(
        "--preview",
        action="store_true",
        help="Print a review preview with summary and warnings instead of raw chunks",
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    """Run the CLI.

    Args:
        argv: Arguments without the program name; defaults to sys.argv.

    Returns:
        Process exit code.
    """
    args = build_parser().parse_args(argv)
    config = load_config(args.config)

    logging.basicConfig(
        level=config.app.log_level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        stream=sys.stderr,
    )

    overrides: dict = {}
    if args.max_chunk_size is not None:
        overrides["max_chunk_size"] = args.max_chunk_size
    if args.overlap is not None:
        overrides["overlap"] = args.overlap
    if args.no_preserve_structure:
        overrides["preserve_structure"] = False
    if args.no_auto_detect:
        overrides["auto_detect_document_type"] = False
    chunking = config.chunking.model_copy(update=overrides)

    try:
        text = read_text_file(args.path)
    except FileNotFoundError:
        logger.error("Input file not found: %s", args.path)
        return 1

    if args.preview:
        preview = build_preview(
            text, chunking, quality=config.quality, document_types=config.document_types
        )
        output = preview.model_dump(mode="json", by_alias=True, exclude_none=True)
    else:
        chunks = SmartChunker(
            chunking, document_types=config.document_types, quality=config.quality
        ).chunk(text)
        output = [chunk.model_dump(mode="json", by_alias=True, exclude_none=True) for chunk in chunks]

    print(json.dumps(output, ensure_ascii=False, indent=2))
    return 0


if __name__ == "__main__":
    sys.exit(main())
