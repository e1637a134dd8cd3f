from __future__ import annotations

import argparse
import sys
from pathlib import Path
from typing import Optional, Sequence

from .config import DEFAULT_CONFIG, SiteConfig, load_config, resolve_site
from .entry import Entry
from .errors import EntryLogError, FilesystemFailure
from .flags import parse_flags
from .render import render_entry, write_text
from .store import EntryStore
from .validate import validate_flags

USAGE_EPILOG = """\
entry flags (all required, values may contain '='):
  --date=YYYY-MM-DD --slug=lowercase-hyphenated --thing=TEXT --type=TEXT
  --proofUrl=URL --proofText=TEXT --reflection=TEXT
"""


def add_entry(entry: Entry, site: SiteConfig) -> str:
    """Write the entry page and add the entry to the index.

    Nothing is written if the slug already exists. A failure while writing
    the index leaves the already written page in place.
    """
    page_path = site.entry_page(entry.slug)
    store = EntryStore(site.index_path)
    entries = store.check(entry.slug)

    page_html = render_entry(entry, site)
    entry_dir = site.entry_dir(entry.slug)
    try:
        entry_dir.mkdir(parents=True, exist_ok=True)
    except OSError as exc:
        raise FilesystemFailure(entry_dir, str(exc), action="create") from exc
    write_text(page_path, page_html)

    store.add(entry, entries)
    return site.entry_url(entry.slug)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Add a dated log entry to the static site.",
        epilog=USAGE_EPILOG,
        formatter_class=argparse.RawDescriptionHelpFormatter,
        allow_abbrev=False,
    )
    parser.add_argument("--config", default=DEFAULT_CONFIG, help="Path to config file (TOML/YAML/JSON).")
    parser.add_argument("--log-dir", dest="log_dir", default="", help="Directory holding entries.json and entry pages.")
    parser.add_argument("--log-url", dest="log_url", default="", help="Public URL prefix of the log directory.")
    parser.add_argument("--site-name", dest="site_name", default="", help="Site title used in entry pages.")
    parser.add_argument("--template", default="", help="HTML template for entry pages.")
    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    if argv is None:
        argv = sys.argv[1:]
    parser = build_parser()
    args, rest = parser.parse_known_args(list(argv))

    try:
        flags = parse_flags(rest)
        entry = validate_flags(flags)
        config_path = Path(args.config)
        site = resolve_site(args, load_config(config_path), config_path)
        url = add_entry(entry, site)
    except EntryLogError as exc:
        print(f"❌ {exc}", file=sys.stderr)
        return 1

    print(f"✅ Added {url}")
    return 0


def run() -> None:
    sys.exit(main())
