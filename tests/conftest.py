"""Shared pytest fixtures for entrylog tests."""
import pytest

from entrylog.config import SiteConfig
from entrylog.entry import Entry


@pytest.fixture
def flags():
    """A complete, valid flag map."""
    return {
        "date": "2025-03-14",
        "slug": "manifesto-rules",
        "thing": "finishingthingz manifesto & rules",
        "type": "system",
        "proofUrl": "/",
        "proofText": "this page",
        "reflection": "built the container first.",
    }


@pytest.fixture
def argv(flags):
    return [f"--{key}={value}" for key, value in flags.items()]


@pytest.fixture
def entry(flags):
    return Entry.from_flags(flags)


@pytest.fixture
def site(tmp_path):
    return SiteConfig(log_dir=tmp_path / "log")


@pytest.fixture
def make_entry():
    """Factory for entries that differ only in slug, date or chosen fields."""

    def factory(slug, date="2025-01-01", **fields):
        values = {
            "date": date,
            "slug": slug,
            "thing": f"thing {slug}",
            "type": "note",
            "proof_url": "/",
            "proof_text": "proof",
            "reflection": "done.",
        }
        values.update(fields)
        return Entry(**values)

    return factory
