from __future__ import annotations

import html
import re
from pathlib import Path
from typing import Optional

from .config import SiteConfig
from .entry import Entry
from .errors import FilesystemFailure

TEMPLATES_DIR = Path(__file__).resolve().parent / "templates"
DEFAULT_TEMPLATE = TEMPLATES_DIR / "entry.html"
PLACEHOLDER_RE = re.compile(r"\{\{(\w+)\}\}")


def escape_html(text: str) -> str:
    # html.escape() would emit &#x27; for the single quote.
    text = html.escape(str(text), quote=False)
    return text.replace('"', "&quot;").replace("'", "&#039;")


def render_template(template: str, **context: str) -> str:
    # Single pass, so substituted values are never scanned for placeholders.
    def repl(match: re.Match) -> str:
        key = match.group(1)
        return context.get(key, match.group(0))

    return PLACEHOLDER_RE.sub(repl, template)


def read_template(path: Path) -> str:
    try:
        return path.read_text(encoding="utf-8")
    except OSError as exc:
        raise FilesystemFailure(path, str(exc), action="read") from exc


def load_template(site: SiteConfig) -> str:
    if site.template:
        return read_template(Path(site.template))
    return read_template(DEFAULT_TEMPLATE)


def render_entry(entry: Entry, site: SiteConfig, template: Optional[str] = None) -> str:
    """Render the standalone page for one entry. No filesystem access when
    ``template`` is given."""
    if template is None:
        template = load_template(site)
    thing = escape_html(entry.thing)
    return render_template(
        template,
        title=f"{thing} — {escape_html(site.site_name)}",
        fonts_url=escape_html(site.fonts_url),
        stylesheet=escape_html(site.stylesheet),
        site_url=escape_html(site.site_url),
        site_name=escape_html(site.site_name),
        back_url=escape_html(site.back_url),
        date=escape_html(entry.date),
        thing=thing,
        type=escape_html(entry.type),
        proof_url=escape_html(entry.proof_url),
        proof_text=escape_html(entry.proof_text),
        reflection=escape_html(entry.reflection),
    )


def write_text(path: Path, text: str) -> None:
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(text, encoding="utf-8")
    except OSError as exc:
        raise FilesystemFailure(path, str(exc)) from exc
