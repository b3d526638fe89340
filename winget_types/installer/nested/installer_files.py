"""Files to run from inside an archive installer."""

from __future__ import annotations

import functools
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

from .portable_command_alias import PortableCommandAlias

_RELATIVE_FILE_PATH = "RelativeFilePath"
_PORTABLE_COMMAND_ALIAS = "PortableCommandAlias"


@functools.total_ordering
@dataclass(frozen=True)
class NestedInstallerFiles:
    """A file within an archive and the alias it is run by, if any."""

    relative_file_path: str
    portable_command_alias: PortableCommandAlias | None = None

    def _sort_key(self) -> tuple:
        alias = self.portable_command_alias
        return (
            self.relative_file_path,
            alias is not None,
            alias.value if alias is not None else "",
        )

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, NestedInstallerFiles):
            return NotImplemented
        return self._sort_key() < other._sort_key()

    def to_dict(self) -> dict[str, str]:
        """The manifest mapping; an absent alias is left out."""
        data = {_RELATIVE_FILE_PATH: self.relative_file_path}
        if self.portable_command_alias is not None:
            data[_PORTABLE_COMMAND_ALIAS] = str(self.portable_command_alias)
        return data

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> NestedInstallerFiles:
        """Build from a manifest mapping."""
        if _RELATIVE_FILE_PATH not in data:
            raise ValueError(f"missing field `{_RELATIVE_FILE_PATH}`")
        path = data[_RELATIVE_FILE_PATH]
        if not isinstance(path, str):
            raise ValueError(f"`{_RELATIVE_FILE_PATH}` must be a string")
        alias = data.get(_PORTABLE_COMMAND_ALIAS)
        if alias is not None and not isinstance(alias, str):
            raise ValueError(f"`{_PORTABLE_COMMAND_ALIAS}` must be a string")
        return cls(path, PortableCommandAlias(alias) if alias is not None else None)