"""
Ordered JSON containers.

``JsonObject`` keeps its members in document order and permits duplicate
names; lookups resolve to the last member with a given name. A small hash
index accelerates lookups but is never trusted without checking the stored
name.
"""

from collections.abc import Iterator
from collections.abc import Sequence
from dataclasses import dataclass
from typing import IO
from typing import Any
from typing import Generic
from typing import TypeAlias
from typing import TypeVar
from typing import overload

from lintjson._errors import ReadOnlyError
from lintjson._values import JsonValue
from lintjson._values import value_of

JsonSource: TypeAlias = str | IO[str]

T = TypeVar("T")


@dataclass(frozen=True, slots=True)
class Member:
    """A name/value pair of a JSON object."""

    name: str
    value: JsonValue


class ReadOnlyList(Sequence[T], Generic[T]):
    """Live, read-only view over a container's internal list."""

    __slots__ = ("_items",)

    def __init__(self, items: list[T]) -> None:
        self._items = items

    @overload
    def __getitem__(self, index: int) -> T: ...

    @overload
    def __getitem__(self, index: slice) -> list[T]: ...

    def __getitem__(self, index: int | slice) -> T | list[T]:
        return self._items[index]

    def __len__(self) -> int:
        return len(self._items)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, ReadOnlyList):
            return self._items == other._items
        if isinstance(other, list):
            return self._items == other
        return NotImplemented

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"ReadOnlyList({self._items!r})"


class HashIndexTable:
    """
    Maps a name's hash slot to the index of the member last added there.

    Stores ``index + 1`` per slot so that 0 marks an empty slot. One
    candidate per slot; a later name hashing to the same slot overwrites the
    earlier one. Indices that do not fit are not stored at all.
    """

    SIZE = 32  # must be a power of two
    MAX_INDEX = 0xFF

    __slots__ = ("_slots",)

    def __init__(self, original: "HashIndexTable | None" = None) -> None:
        if original is None:
            self._slots = [0] * self.SIZE
        else:
            self._slots = list(original._slots)

    def _slot_for(self, name: str) -> int:
        return hash(name) & (self.SIZE - 1)

    def add(self, name: str, index: int) -> None:
        slot = self._slot_for(name)
        if index < self.MAX_INDEX:
            self._slots[slot] = index + 1
        else:
            self._slots[slot] = 0

    def get(self, name: str) -> int:
        """Returns the candidate index for ``name``, or -1."""
        return self._slots[self._slot_for(name)] - 1

    def remove(self, index: int) -> None:
        """Drops ``index`` and shifts every later index down by one."""
        stored = index + 1
        slots = self._slots
        for i, entry in enumerate(slots):
            if entry == stored:
                slots[i] = 0
            elif entry > stored:
                slots[i] = entry - 1


def _check_name(name: Any) -> str:
    if not isinstance(name, str):
        msg = f"names must be strings, not {type(name).__name__}"
        raise TypeError(msg)
    return name


class JsonObject(JsonValue):
    """
    A JSON object: an ordered sequence of members.

    ``add`` appends without looking for existing members and is the
    preferred way to fill a new object. ``set`` replaces the value of the
    last member with the given name, or appends when there is none.
    """

    __slots__ = ("_names", "_values", "_table", "_read_only")

    def __init__(self, other: "JsonObject | None" = None) -> None:
        if other is None:
            self._names: list[str] = []
            self._values: list[JsonValue] = []
        else:
            self._names = list(other._names)
            self._values = list(other._values)
        self._table = HashIndexTable()
        self._read_only = False
        self._update_hash_index()

    @classmethod
    def unmodifiable_object(cls, obj: "JsonObject") -> "JsonObject":
        """
        Returns a read-only view backed by ``obj``.

        The view reflects later changes to ``obj``; mutating the view raises
        ``ReadOnlyError``.
        """
        view = cls.__new__(cls)
        view._names = obj._names
        view._values = obj._values
        view._table = HashIndexTable()
        view._read_only = True
        return view

    @classmethod
    def read_from(cls, source: JsonSource) -> "JsonObject":
        """Parses ``source`` and requires the document to be an object."""
        from lintjson._parser import parse

        return parse(source).as_object()

    def _check_writable(self) -> None:
        if self._read_only:
            raise ReadOnlyError("object is read-only")

    def add(self, name: str, value: Any) -> "JsonObject":
        """Appends a member, even if one with this name already exists."""
        self._check_writable()
        name = _check_name(name)
        value = value_of(value)
        self._table.add(name, len(self._names))
        self._names.append(name)
        self._values.append(value)
        return self

    def set(self, name: str, value: Any) -> "JsonObject":
        """Replaces the value of the last member named ``name``, or appends."""
        self._check_writable()
        name = _check_name(name)
        value = value_of(value)
        index = self.index_of(name)
        if index != -1:
            self._values[index] = value
        else:
            self._table.add(name, len(self._names))
            self._names.append(name)
            self._values.append(value)
        return self

    def get(self, name: str) -> JsonValue | None:
        """Returns the value of the last member named ``name``."""
        index = self.index_of(_check_name(name))
        return self._values[index] if index != -1 else None

    def remove(self, name: str) -> "JsonObject":
        """Removes the last member named ``name``, if any."""
        self._check_writable()
        index = self.index_of(_check_name(name))
        if index != -1:
            self._table.remove(index)
            del self._names[index]
            del self._values[index]
        return self

    def contains(self, name: str) -> bool:
        return self.index_of(_check_name(name)) != -1

    def names(self) -> ReadOnlyList[str]:
        """Returns a live, read-only view of the names in document order."""
        return ReadOnlyList(self._names)

    def size(self) -> int:
        return len(self._names)

    def is_empty(self) -> bool:
        return not self._names

    def index_of(self, name: str) -> int:
        """Returns the index of the last member named ``name``, or -1."""
        names = self._names
        if not self._read_only:
            index = self._table.get(name)
            if index != -1 and index < len(names) and names[index] == name:
                return index
        for index in range(len(names) - 1, -1, -1):
            if names[index] == name:
                return index
        return -1

    def _update_hash_index(self) -> None:
        for index, name in enumerate(self._names):
            self._table.add(name, index)

    def is_object(self) -> bool:
        return True

    def as_object(self) -> "JsonObject":
        return self

    def __len__(self) -> int:
        return len(self._names)

    def __iter__(self) -> Iterator[Member]:
        for name, value in zip(self._names, self._values, strict=True):
            yield Member(name, value)

    def __contains__(self, name: object) -> bool:
        return isinstance(name, str) and self.index_of(name) != -1

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, JsonObject):
            return NotImplemented
        return self._names == other._names and self._values == other._values

    def __hash__(self) -> int:
        return hash((tuple(self._names), tuple(self._values)))

    def __repr__(self) -> str:
        members = ", ".join(
            f"{name!r}: {value!r}"
            for name, value in zip(self._names, self._values, strict=True)
        )
        return f"JsonObject({{{members}}})"


class JsonArray(JsonValue):
    """A JSON array: an ordered sequence of values."""

    __slots__ = ("_values", "_read_only")

    def __init__(self, other: "JsonArray | None" = None) -> None:
        self._values: list[JsonValue] = (
            [] if other is None else list(other._values)
        )
        self._read_only = False

    @classmethod
    def unmodifiable_array(cls, array: "JsonArray") -> "JsonArray":
        """Returns a read-only view backed by ``array``."""
        view = cls.__new__(cls)
        view._values = array._values
        view._read_only = True
        return view

    @classmethod
    def read_from(cls, source: JsonSource) -> "JsonArray":
        """Parses ``source`` and requires the document to be an array."""
        from lintjson._parser import parse

        return parse(source).as_array()

    def _check_writable(self) -> None:
        if self._read_only:
            raise ReadOnlyError("array is read-only")

    def add(self, value: Any) -> "JsonArray":
        """Appends a value."""
        self._check_writable()
        self._values.append(value_of(value))
        return self

    def set(self, index: int, value: Any) -> "JsonArray":
        """Replaces the element at ``index``."""
        self._check_writable()
        self._values[index] = value_of(value)
        return self

    def get(self, index: int) -> JsonValue:
        return self._values[index]

    def remove(self, index: int) -> "JsonArray":
        """Removes the element at ``index``."""
        self._check_writable()
        del self._values[index]
        return self

    def values(self) -> ReadOnlyList[JsonValue]:
        """Returns a live, read-only view of the elements."""
        return ReadOnlyList(self._values)

    def size(self) -> int:
        return len(self._values)

    def is_empty(self) -> bool:
        return not self._values

    def is_array(self) -> bool:
        return True

    def as_array(self) -> "JsonArray":
        return self

    def __len__(self) -> int:
        return len(self._values)

    def __iter__(self) -> Iterator[JsonValue]:
        return iter(self._values)

    def __getitem__(self, index: int) -> JsonValue:
        return self._values[index]

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, JsonArray):
            return NotImplemented
        return self._values == other._values

    def __hash__(self) -> int:
        return hash(tuple(self._values))

    def __repr__(self) -> str:
        return f"JsonArray({self._values!r})"
