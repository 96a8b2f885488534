"""Jinja2 environment shared by the artifact generators."""

from __future__ import annotations

from pathlib import Path

from jinja2 import Environment, FileSystemLoader, StrictUndefined, Template, select_autoescape

TEMPLATES_DIR = Path(__file__).parent / "templates"

_env = None


def make_env(template_dir: Path = TEMPLATES_DIR) -> Environment:
    # Only the SVG output is markup; HDL and Markdown are emitted verbatim.
    return Environment(
        loader=FileSystemLoader(str(template_dir)),
        autoescape=select_autoescape(enabled_extensions=("svg.jinja2",), default_for_string=False),
        undefined=StrictUndefined,
        trim_blocks=True,
        lstrip_blocks=True,
        keep_trailing_newline=True,
    )


def get_template(name: str) -> Template:
    """Return a template from :data:`TEMPLATES_DIR`, building the environment once."""
    global _env
    if _env is None:
        _env = make_env()
    return _env.get_template(name)
