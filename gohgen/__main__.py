"""Entry point: python -m gohgen DOCUMENT [DOCUMENT ...]

Reads parsed-template JSON documents and writes one <template>.go file
per document into the destination directory.
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from .codegen import write_source
from .config import GeneratorConfig
from .errors import GeneratorError
from .loader import load_document
from .postprocess import run_format_command


def build_argument_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="gohgen", description="Generate Go render functions from parsed templates",
    )
    parser.add_argument("documents", nargs="+", type=Path)
    parser.add_argument("--package", dest="package_name", default=None)
    parser.add_argument("--dest", dest="destination", type=Path, default=None)
    parser.add_argument("--format-command", default=None)
    parser.add_argument("-v", "--verbose", action="store_true", default=False)
    return parser


def run(config: GeneratorConfig, documents: list[Path]) -> None:
    for document in documents:
        template = load_document(document)
        output_path = write_source(template, config.destination, config.package_name)
        if config.format_command:
            run_format_command(config.format_command, output_path)
        print(f"Generated {output_path} ({len(template.blocks)} blocks)")


def main(argv: list[str] | None = None) -> int:
    args = build_argument_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(levelname)s %(name)s: %(message)s",
    )
    try:
        config = GeneratorConfig.from_env().override(
            package_name=args.package_name,
            destination=args.destination,
            format_command=args.format_command,
        )
        run(config, args.documents)
    except GeneratorError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
