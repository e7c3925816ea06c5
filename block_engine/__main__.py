"""
CLI block engine.

Usage:
    python -m block_engine page site.json [--theme-out theme.json]
    python -m block_engine theme theme-config.json
    python -m block_engine section hero hero.json [--layout split-left]
"""
import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional

from pydantic import ValidationError

from .config import LOG_LEVEL
from .errors import BlockEngineError
from .manifest import load_json, load_manifest, render_manifest
from .patterns import create_pattern
from .renderer import get_renderer
from .theme import generate_theme_json, theme_to_json

log = logging.getLogger(__name__)


def cmd_page(args) -> int:
    """Manifest → markup de la page (stdout), theme.json optionnel."""
    output = render_manifest(load_manifest(args.manifest))
    print(output.markup)
    if args.theme_out:
        Path(args.theme_out).write_text(theme_to_json(output.theme) + "\n", encoding="utf-8")
        log.info("theme.json écrit : %s", args.theme_out)
    return 0


def cmd_theme(args) -> int:
    print(theme_to_json(generate_theme_json(load_json(args.config))))
    return 0


def cmd_section(args) -> int:
    """Une section seule → markup (ou arbre JSON). Type inconnu → code 2."""
    node = create_pattern(args.type, load_json(args.config), args.layout)
    if node is None:
        log.error("Type de section inconnu : %s", args.type)
        return 2
    print(get_renderer(args.format).render_block(node))
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="block-engine",
        description="Sections → block markup Gutenberg + theme.json",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    subparsers = parser.add_subparsers(dest="command", help="Commandes disponibles")

    page_parser = subparsers.add_parser("page", help="Rendre une page depuis un manifest JSON")
    page_parser.add_argument("manifest", help="Chemin du manifest")
    page_parser.add_argument("--theme-out", help="Écrire le theme.json à ce chemin")
    page_parser.set_defaults(func=cmd_page)

    theme_parser = subparsers.add_parser("theme", help="Générer un theme.json depuis une config")
    theme_parser.add_argument("config", help="Chemin de la config thème")
    theme_parser.set_defaults(func=cmd_theme)

    section_parser = subparsers.add_parser("section", help="Rendre une section seule")
    section_parser.add_argument("type", help="Type de section (hero, features, pricing…)")
    section_parser.add_argument("config", help="Chemin de la config de section")
    section_parser.add_argument("--layout", help="Variante de layout")
    section_parser.add_argument("--format", default="markup", choices=["markup", "json"], help="Sortie : block markup ou arbre JSON")
    section_parser.set_defaults(func=cmd_section)

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    logging.basicConfig(level=LOG_LEVEL, format="%(levelname)s %(name)s — %(message)s")
    parser = build_parser()
    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        return 1

    try:
        return args.func(args)
    except (BlockEngineError, ValidationError, OSError) as exc:
        log.error("%s", exc)
        return 1


if __name__ == "__main__":
    sys.exit(main())
