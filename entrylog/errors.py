from __future__ import annotations

from pathlib import Path


class EntryLogError(Exception):
    """Base class for every failure that aborts an add-entry run."""


class MissingArgument(EntryLogError):
    def __init__(self, key: str) -> None:
        self.key = key
        super().__init__(f"Missing --{key}")


class InvalidDateFormat(EntryLogError):
    def __init__(self, value: str) -> None:
        self.value = value
        super().__init__("date must be in YYYY-MM-DD format")


class InvalidSlugFormat(EntryLogError):
    def __init__(self, value: str) -> None:
        self.value = value
        super().__init__("slug must be lowercase and hyphenated (e.g. manifesto-rules)")


class DuplicateSlug(EntryLogError):
    def __init__(self, slug: str) -> None:
        self.slug = slug
        super().__init__(f'Entry with slug "{slug}" already exists')


class MalformedIndex(EntryLogError):
    def __init__(self, path: Path, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"Invalid entries index {path}: {reason}")


class FilesystemFailure(EntryLogError):
    def __init__(self, path: Path, reason: str, action: str = "write") -> None:
        self.path = path
        self.reason = reason
        self.action = action
        super().__init__(f"Could not {action} {path}: {reason}")


class InvalidConfig(EntryLogError):
    def __init__(self, path: Path, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"Invalid config file {path}: {reason}")
