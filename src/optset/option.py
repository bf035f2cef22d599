from __future__ import annotations

from enum import Enum

__all__ = ["Option"]


class Option(Enum):
    """Base class for option enumerations.

    Each member is declared with its acronym and its name is the long form, e.g.::

        class Ls(Option):
            all = "a"
            long_format = "l"

    Member values are assigned in declaration order, so two options may share
    an acronym and still be distinct members.
    """

    _acronym: str

    def __new__(cls, acronym: str) -> Option:
        member = object.__new__(cls)
        member._value_ = len(cls.__members__) + 1
        member._acronym = acronym
        return member

    @property
    def acronym(self) -> str:
        return self._acronym

    @property
    def long_name(self) -> str:
        return self.name.replace("_", "-")
