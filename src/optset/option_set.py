from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Iterable, Iterator, MutableSet
from typing import Any, Generic, TypeVar

from typing_extensions import Self

from optset.logging import get_logger
from optset.option import Option

__all__ = ["OptionSet", "DefaultOptionSet"]

E = TypeVar("E", bound=Option)

logger = get_logger("option_set")


class OptionSet(Generic[E], ABC):
    """Read interface of a set of options bound to one `Option` enumeration."""

    @property
    @abstractmethod
    def option_type(self) -> type[E]: ...

    @abstractmethod
    def is_set(self, option: E) -> bool: ...

    @abstractmethod
    def use_acronym_for(self, option: E) -> bool: ...

    @abstractmethod
    def as_set(self) -> MutableSet[E]: ...

    @abstractmethod
    def __iter__(self) -> Iterator[E]: ...

    def __contains__(self, option: object) -> bool:
        return option in self.as_set()

    def __len__(self) -> int:
        return len(self.as_set())


class DefaultOptionSet(OptionSet[E]):
    """Mutable set of options with per-option acronym display flags.

    Construct from one or more options of the same enumeration, or from the
    enumeration type alone (optionally followed by initial options)::

        DefaultOptionSet(Ls.all)
        DefaultOptionSet(Ls.all, Ls.long_format)
        DefaultOptionSet(Ls)

    Mutators return the instance for chaining. Passing ``None`` or an option of
    another enumeration to a mutator is a caller error and is not checked.
    Equality and hashing only consider the set options, not the acronym flags.
    """

    def __init__(self, first: E | type[E], *rest: E) -> None:
        if isinstance(first, Option):
            option_type = type(first)
            initial: tuple[E, ...] = (first, *rest)
        elif isinstance(first, type) and issubclass(first, Option):
            option_type = first
            initial = rest
        else:
            raise TypeError(
                f"Expected an Option member or Option subclass, got {type(first).__name__}."
            )

        for option in initial:
            if not isinstance(option, option_type):
                raise ValueError(f"{option!r} is not a member of {option_type.__name__}.")

        self._option_type: type[E] = option_type
        self._selected: set[E] = set(initial)
        self._use_acronym: set[E] = set()

    @property
    def option_type(self) -> type[E]:
        return self._option_type

    ### mutators ###

    def set(self, option: E) -> Self:
        self._selected.add(option)
        return self

    def set_all(self, *options: E | Iterable[E]) -> Self:
        """Set every given option.

        Accepts options as positional arguments or a single iterable of options.
        When given a single `OptionSet`, its options are merged in and its acronym
        flags replace the flags of this set for every member of the enumeration.
        """
        if len(options) == 1 and isinstance(options[0], OptionSet):
            return self._merge(options[0])

        if len(options) == 1 and not isinstance(options[0], Option):
            options = tuple(options[0])

        for option in options:
            self.set(option)  # type: ignore[arg-type]

        return self

    def _merge(self, other: OptionSet[E]) -> Self:
        logger.debug(
            "Merging %d option(s) into %s, overwriting acronym flags.",
            len(other),
            self._option_type.__name__,
        )
        self._selected.update(other.as_set())
        for option in self._option_type:
            self.set_use_acronym_for(option, other.use_acronym_for(option))

        return self

    def set_use_acronym_for(self, option: E, use_acronym: bool) -> Self:
        if use_acronym:
            self._use_acronym.add(option)
        else:
            self._use_acronym.discard(option)

        return self

    def set_use_acronym_for_all(self, use_acronym: bool) -> Self:
        if use_acronym:
            self._use_acronym.update(self._option_type)
        else:
            self._use_acronym.clear()

        return self

    ### accessors ###

    def is_set(self, option: E) -> bool:
        return option in self._selected

    def size(self) -> int:
        return len(self._selected)

    def is_empty(self) -> bool:
        return not self._selected

    def use_acronym_for(self, option: E) -> bool:
        return option in self._use_acronym

    def as_set(self) -> MutableSet[E]:
        """Return the backing set; changes to it are changes to this option set."""
        return self._selected

    def __iter__(self) -> Iterator[E]:
        return (option for option in self._option_type if option in self._selected)

    ### copying ###

    def copy(self) -> Self:
        clone = type(self)(self._option_type)
        clone._selected = set(self._selected)
        clone._use_acronym = set(self._use_acronym)
        return clone

    __copy__ = copy

    def __deepcopy__(self, memo: dict[int, Any]) -> Self:
        # enum members are singletons, a shallow copy of both sets is already deep
        return self.copy()

    ### dunder ###

    def __eq__(self, other: object) -> bool:
        if self is other:
            return True
        if isinstance(other, OptionSet):
            return self._selected == set(other.as_set())
        return NotImplemented

    def __hash__(self) -> int:
        return hash(frozenset(self._selected))

    def __str__(self) -> str:
        return "{" + ", ".join(option.name for option in self) + "}"

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._option_type.__name__}, {self})"
