from __future__ import annotations

import json
from pathlib import Path

from .entry import Entry, sort_entries
from .errors import DuplicateSlug, FilesystemFailure, MalformedIndex


def load_entries(path: Path) -> list[Entry]:
    if not path.exists():
        return []
    try:
        raw = path.read_bytes()
    except OSError as exc:
        raise FilesystemFailure(path, str(exc), action="read") from exc
    try:
        data = json.loads(raw.decode("utf-8"))
    except (UnicodeDecodeError, json.JSONDecodeError) as exc:
        raise MalformedIndex(path, str(exc)) from exc
    if not isinstance(data, list):
        raise MalformedIndex(path, f"expected a JSON array, got {type(data).__name__}")
    entries = []
    for position, record in enumerate(data):
        try:
            entries.append(Entry.from_record(record))
        except ValueError as exc:
            raise MalformedIndex(path, f"entry {position}: {exc}") from exc
    return entries


def ensure_unique(entries: list[Entry], slug: str) -> None:
    if any(entry.slug == slug for entry in entries):
        raise DuplicateSlug(slug)


def insert_entry(entries: list[Entry], entry: Entry) -> list[Entry]:
    return sort_entries([entry, *entries])


def dump_entries(entries: list[Entry]) -> str:
    records = [entry.to_record() for entry in entries]
    return json.dumps(records, indent=2, ensure_ascii=False) + "\n"


def save_entries(path: Path, entries: list[Entry]) -> None:
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(dump_entries(entries), encoding="utf-8")
    except OSError as exc:
        raise FilesystemFailure(path, str(exc)) from exc


class EntryStore:
    """The entries.json index: the only record of which slugs exist."""

    def __init__(self, path: Path) -> None:
        self.path = path

    def load(self) -> list[Entry]:
        return load_entries(self.path)

    def check(self, slug: str) -> list[Entry]:
        entries = self.load()
        ensure_unique(entries, slug)
        return entries

    def add(self, entry: Entry, entries: list[Entry] | None = None) -> list[Entry]:
        """Insert ``entry`` and rewrite the index.

        ``entries`` is the collection returned by an earlier ``check``; when
        omitted the index is loaded and checked here.
        """
        if entries is None:
            entries = self.check(entry.slug)
        else:
            ensure_unique(entries, entry.slug)
        updated = insert_entry(entries, entry)
        save_entries(self.path, updated)
        return updated
