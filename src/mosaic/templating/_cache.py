"""Compiled partial records and their cache."""

from dataclasses import dataclass
from pathlib import Path

from jinja2 import Template

from ._data import DataMapping


@dataclass(slots=True, frozen=True)
class PartialRecord:
    """A resolved and compiled partial.

    Attributes:
        name: Name the partial was requested by.
        path: Absolute path of the partial file.
        raw_content: File content, front matter included.
        body: Template source with the front matter removed.
        front_matter: Data parsed from the front matter block.
        external_data: Data loaded from the sidecar data file.
        data: Front matter merged with external data, external data winning.
        template: Body compiled by the host environment.
    """

    name: str
    path: Path
    raw_content: str
    body: str
    front_matter: DataMapping
    external_data: DataMapping
    data: DataMapping
    template: Template


class PartialCache:
    """Write-once mapping from partial name to PartialRecord.

    Once a name is stored its record is never replaced or removed. Names are
    used verbatim, so two names that point at the same file are cached
    independently.

    Not thread-safe. Concurrent population of the same name results in a
    duplicate load where the first stored record wins.
    """

    def __init__(self) -> None:
        self._records: dict[str, PartialRecord] = {}

    def __contains__(self, name: object) -> bool:
        return name in self._records

    def __len__(self) -> int:
        return len(self._records)

    def get(self, name: str) -> PartialRecord | None:
        """Return the record cached under name, or None."""
        return self._records.get(name)

    def add(self, record: PartialRecord) -> PartialRecord:
        """Store a record unless its name is already cached.

        Returns:
            The record now cached under ``record.name``; the existing one if
            the name was already present.
        """
        return self._records.setdefault(record.name, record)

    def names(self) -> tuple[str, ...]:
        """Return cached names in insertion order."""
        return tuple(self._records)
