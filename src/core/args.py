from argparse import ArgumentParser
from dataclasses import dataclass
from pathlib import Path
from typing import List, Optional

from core.globals import VERSION


__all__ = ["Args", "parse_args"]


@dataclass
class Args:
    section: str
    pdf: Optional[Path]
    url: Optional[str]
    config: Optional[Path]
    strict_boundary: bool
    scoped: bool
    DEBUG: bool


def parse_args(argv: Optional[List[str]] = None) -> Args:
    parser = ArgumentParser(
        prog="sectext",
        description="Extract the text of one numbered section from a consolidated PDF",
    )
    parser.add_argument("section", help="Section identifier, e.g. 10 or 115BAC")

    source = parser.add_mutually_exclusive_group()
    source.add_argument("--pdf", type=Path, default=None,
                        help="Local PDF file to extract from")
    source.add_argument("--url", default=None,
                        help="PDF URL to download and extract from (default: configured document)")

    parser.add_argument("--config", type=Path, default=None,
                        help="Path to an extractor_config.yaml")
    parser.add_argument("--strict-boundary", default=False, action="store_true",
                        help="Only stop at section numbers that sort after the requested one")
    parser.add_argument("--scoped", default=False, action="store_true",
                        help="Document holds only the requested section; take all of its text")
    parser.add_argument("--DEBUG", default=False, action="store_true")
    parser.add_argument("--version", action="version", version=f"%(prog)s {VERSION}")

    args = parser.parse_args(argv)
    section = args.section.strip()
    if not section:
        parser.error("section identifier must not be blank")

    return Args(
        section=section,
        pdf=args.pdf,
        url=args.url,
        config=args.config,
        strict_boundary=args.strict_boundary,
        scoped=args.scoped,
        DEBUG=args.DEBUG,
    )
