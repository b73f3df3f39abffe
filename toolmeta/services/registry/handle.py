"""Immutable registry value shared by the accessor, validator and generator."""

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Iterator, Mapping, Optional

from toolmeta.services.locales import DEFAULT_LOCALE_TABLE, LocaleTable

from .config import TOOL_CATEGORIES
from .models import ToolMetadataEntry


@dataclass(frozen=True, eq=False)
class RegistryHandle:
    """A loaded registry plus the locale table and categories it is checked against.

    Entries keep their definition order so the validator can see duplicates.
    Lookups by id resolve to the first definition of that id.

    Attributes:
        entries: Registry records in definition order
        locales: Locale table used for fallback and URL generation
        categories: Known category enumeration
    """

    entries: tuple[ToolMetadataEntry, ...]
    locales: LocaleTable = field(default=DEFAULT_LOCALE_TABLE)
    categories: tuple[str, ...] = TOOL_CATEGORIES
    _index: Mapping[str, ToolMetadataEntry] = field(init=False, repr=False, compare=False)

    def __post_init__(self):
        object.__setattr__(self, "entries", tuple(self.entries))
        object.__setattr__(self, "categories", tuple(self.categories))

        index: dict[str, ToolMetadataEntry] = {}
        for entry in self.entries:
            index.setdefault(entry.id, entry)
        object.__setattr__(self, "_index", MappingProxyType(index))

    def __iter__(self) -> Iterator[ToolMetadataEntry]:
        return iter(self.entries)

    def __len__(self) -> int:
        return len(self.entries)

    def __contains__(self, tool_id: object) -> bool:
        return isinstance(tool_id, str) and tool_id in self._index

    def get(self, tool_id: Optional[str]) -> Optional[ToolMetadataEntry]:
        if not isinstance(tool_id, str):
            return None
        return self._index.get(tool_id)

    @property
    def ids(self) -> list[str]:
        """Distinct entry ids, sorted."""
        return sorted(self._index)
