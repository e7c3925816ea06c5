"""Manifest — schema + parser."""
from .schema import SiteManifest, SectionEntry
from .parser import (
    SiteOutput, build_blocks, render_manifest, load_manifest, load_json, resolve_placeholders,
)

__all__ = [
    "SiteManifest",
    "SectionEntry",
    "SiteOutput",
    "build_blocks",
    "render_manifest",
    "load_manifest",
    "load_json",
    "resolve_placeholders",
]
