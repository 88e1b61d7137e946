"""Character tables used to render status tokens."""

from __future__ import annotations

from collections.abc import Mapping
from types import MappingProxyType

from pydantic import BaseModel, ConfigDict, field_validator

from status.types import StatusKind

_RENDERED_KINDS = (
    StatusKind.MODIFIED,
    StatusKind.ADDED,
    StatusKind.DELETED,
    StatusKind.UNVERSIONED,
    StatusKind.MISSING,
    StatusKind.REPLACED,
    StatusKind.CONFLICTED,
    StatusKind.OBSTRUCTED,
    StatusKind.IGNORED,
    StatusKind.INCOMPLETE,
    StatusKind.EXTERNAL,
)


class Alphabet(BaseModel):
    """Maps status kinds and auxiliary markers to single characters."""

    model_config = ConfigDict(frozen=True)

    name: str
    separator: str
    out_of_date: str
    characters: Mapping[StatusKind, str]

    @field_validator("characters", mode="after")
    @classmethod
    def _read_only(cls, value: Mapping[StatusKind, str]) -> Mapping[StatusKind, str]:
        return MappingProxyType(dict(value))

    def char_for(self, kind: StatusKind) -> str:
        return self.characters[kind]


STANDARD = Alphabet(
    name="standard",
    separator=" ",
    out_of_date="*",
    characters={kind: kind.code for kind in _RENDERED_KINDS},
)

# Replaces characters that are unsafe in file and artifact names.
FILE_NAME_SAFE = Alphabet(
    name="file-name-safe",
    separator="-",
    out_of_date="d",
    characters={
        **STANDARD.characters,
        StatusKind.UNVERSIONED: "u",
        StatusKind.MISSING: "m",
        StatusKind.OBSTRUCTED: "o",
        StatusKind.INCOMPLETE: "i",
    },
)
