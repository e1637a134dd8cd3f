from __future__ import annotations

from dataclasses import dataclass

# Flag name -> attribute name, in the order the validator checks presence.
FLAG_FIELDS = {
    "date": "date",
    "slug": "slug",
    "thing": "thing",
    "type": "type",
    "proofUrl": "proof_url",
    "proofText": "proof_text",
    "reflection": "reflection",
}
RECORD_KEYS = ("date", "slug", "thing", "type", "proofText", "proofUrl", "reflection")


@dataclass(frozen=True)
class Entry:
    date: str
    slug: str
    thing: str
    type: str
    proof_url: str
    proof_text: str
    reflection: str

    @classmethod
    def from_flags(cls, flags: dict[str, str]) -> "Entry":
        return cls(**{attr: flags[key] for key, attr in FLAG_FIELDS.items()})

    @classmethod
    def from_record(cls, record: object) -> "Entry":
        """Build an entry from one element of entries.json.

        Raises ValueError when the record is not an object with string
        values for every field; the store turns that into MalformedIndex.
        """
        if not isinstance(record, dict):
            raise ValueError(f"expected an object, got {type(record).__name__}")
        values = {}
        for key, attr in FLAG_FIELDS.items():
            value = record.get(key)
            if not isinstance(value, str):
                raise ValueError(f"record is missing string field {key!r}")
            values[attr] = value
        return cls(**values)

    def to_record(self) -> dict[str, str]:
        values = {key: getattr(self, attr) for key, attr in FLAG_FIELDS.items()}
        return {key: values[key] for key in RECORD_KEYS}


def sort_entries(entries: list[Entry]) -> list[Entry]:
    # Newest first; dates are fixed-width so string order is date order.
    by_slug = sorted(entries, key=lambda e: e.slug)
    return sorted(by_slug, key=lambda e: e.date, reverse=True)
