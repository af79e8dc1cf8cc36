from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Mapping

PROFILATOR_HANDLE = "@profilator"
BLANK_HANDLE = "@blank"
NOT_FOUND_HANDLE = "404"

RESERVED_HANDLES = (PROFILATOR_HANDLE, BLANK_HANDLE, NOT_FOUND_HANDLE)


@dataclass(frozen=True)
class ProfileCatalog:
    """Pre-rendered special-case cards, built once at startup.

    Lookups hand back the stored string objects; nothing is re-rendered.
    """

    profilator: str
    blank: str
    not_found: str
    _entries: Mapping[str, str] = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        entries = MappingProxyType(
            {
                PROFILATOR_HANDLE: self.profilator,
                BLANK_HANDLE: self.blank,
                NOT_FOUND_HANDLE: self.not_found,
            }
        )
        object.__setattr__(self, "_entries", entries)

    @property
    def entries(self) -> Mapping[str, str]:
        return self._entries

    def get(self, handle: str) -> str | None:
        return self._entries.get(handle)

    def __contains__(self, handle: object) -> bool:
        return handle in self._entries
