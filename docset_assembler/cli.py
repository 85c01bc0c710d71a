#!/usr/bin/env python3
"""
cli.py
======
Command line front end for ``DocsetAssembler``.

Usage
-----
    docset-assemble --documentation build/html --name MyLib [options]
    docset-assemble --config docset.yml [options]

Options given on the command line override the values from ``--config``.
"""

from __future__ import annotations

import argparse
import logging
import sys

from .archive import archive_docset
from .assembler import DocsetAssembler
from .config import DocsetConfig, load_config, load_entries
from .errors import DocsetError

log = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="docset-assemble",
        description="Package an HTML documentation tree as a Dash docset",
        formatter_class=argparse.ArgumentDefaultsHelpFormatter,
    )
    parser.add_argument("--config", metavar="FILE", help="YAML file with the docset configuration.")
    parser.add_argument("--documentation", metavar="DIR", help="Folder holding the HTML documentation.")
    parser.add_argument(
        "--destination",
        metavar="DIR",
        help="Folder in which to create the docset. Defaults to the documentation folder.",
    )
    parser.add_argument("--name", help="Display name of the docset.")
    parser.add_argument("--identifier", help="Bundle identifier. Defaults to the name.")
    parser.add_argument("--index", metavar="FILE", help="Start page, relative to the documentation (default: index.html).")
    parser.add_argument(
        "--enable-javascript",
        action="store_true",
        default=None,
        help="Allow JavaScript when the docset is viewed.",
    )
    parser.add_argument("--platform-family", metavar="FAMILY", help="Platform family. Defaults to the name.")
    parser.add_argument("--icon", metavar="PNG", help="Icon copied into the docset as icon.png.")
    parser.add_argument("--entries", metavar="FILE", help="YAML or JSON list of {name, type, path} search entries.")
    parser.add_argument(
        "--index-pages",
        action="store_true",
        default=None,
        help="Add a Guide entry for the title of every HTML page.",
    )
    parser.add_argument("--fallback-url", metavar="URL", help="Online location of the documentation.")
    parser.add_argument("--keyword", help="Default Dash search keyword.")
    parser.add_argument("--archive", action="store_true", help="Also write <identifier>.tgz next to the docset.")
    parser.add_argument("-v", "--verbose", action="store_true", default=None, help="Log every step.")
    return parser


def config_from_args(args: argparse.Namespace) -> DocsetConfig:
    overrides = {
        "documentation": args.documentation,
        "destination": args.destination,
        "name": args.name,
        "identifier": args.identifier,
        "index": args.index,
        "enable_javascript": args.enable_javascript,
        "platform_family": args.platform_family,
        "icon": args.icon,
        "entries": load_entries(args.entries) if args.entries else None,
        "index_pages": args.index_pages,
        "fallback_url": args.fallback_url,
        "keyword": args.keyword,
        "verbose": args.verbose,
    }
    if args.config:
        return load_config(args.config, **overrides)
    if not args.documentation or not args.name:
        raise DocsetError("--documentation and --name are required without --config")
    return DocsetConfig(**{k: v for k, v in overrides.items() if v is not None})


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(levelname)-8s %(message)s",
        datefmt="%H:%M:%S",
    )

    try:
        config = config_from_args(args)
        bundle = DocsetAssembler(config).create()
        if args.archive:
            archive_docset(bundle.path)
    except DocsetError as exc:
        log.error("%s", exc)
        return 1

    log.info("Docset: %s", bundle.path)
    return 0


if __name__ == "__main__":
    sys.exit(main())
