"""An in-memory JSON document tree with ordered, case-insensitive object keys."""

import enum
import string as _string
from typing import Any, Iterable, Iterator, List, Optional

_UINT64_MASK = (1 << 64) - 1
_ASCII_FOLD = str.maketrans(_string.ascii_uppercase, _string.ascii_lowercase)


def _fold(text: Optional[str]) -> Optional[str]:
    return None if text is None else text.translate(_ASCII_FOLD)


class JsonType(enum.IntEnum):
    """Kinds of value a node can hold."""

    FALSE = 0
    TRUE = 1
    NULL = 2
    NUMBER = 3
    STRING = 4
    ARRAY = 5
    OBJECT = 6


class JsonNode:
    """One JSON value; arrays and objects hold an ordered list of child nodes.

    Numbers are unsigned 64-bit integers. A child of an object carries its
    key in ``name``. A reference node shares the value and children of the
    node it was made from.
    """

    __slots__ = ("type", "value", "name", "is_reference", "_children")

    def __init__(self, kind: JsonType, value: Any = None) -> None:
        self.type = kind
        self.value = value
        self.name: Optional[str] = None
        self.is_reference = False
        self._children: List["JsonNode"] = []

    # Construction

    @classmethod
    def null(cls) -> "JsonNode":
        """A null value."""
        return cls(JsonType.NULL)

    @classmethod
    def true(cls) -> "JsonNode":
        """The value true."""
        return cls(JsonType.TRUE)

    @classmethod
    def false(cls) -> "JsonNode":
        """The value false."""
        return cls(JsonType.FALSE)

    @classmethod
    def boolean(cls, value: Any) -> "JsonNode":
        """True or false according to the truth of ``value``."""
        return cls(JsonType.TRUE if value else JsonType.FALSE)

    @classmethod
    def number(cls, value: Any) -> "JsonNode":
        """An unsigned 64-bit number; fractions are truncated, negatives wrap."""
        return cls(JsonType.NUMBER, int(value) & _UINT64_MASK)

    @classmethod
    def string(cls, value: str) -> "JsonNode":
        """A string value."""
        if not isinstance(value, str):
            raise TypeError("string node needs a str value")
        return cls(JsonType.STRING, value)

    @classmethod
    def array(cls, items: Iterable[Any] = ()) -> "JsonNode":
        """An array of ``items``: nodes are added as they are, others as numbers."""
        node = cls(JsonType.ARRAY)
        for item in items:
            node.append(item if isinstance(item, JsonNode) else cls.number(item))
        return node

    @classmethod
    def string_array(cls, strings: Iterable[str]) -> "JsonNode":
        """An array holding one string node for each of ``strings``."""
        node = cls(JsonType.ARRAY)
        for text in strings:
            node.append(cls.string(text))
        return node

    @classmethod
    def object(cls) -> "JsonNode":
        """An empty object."""
        return cls(JsonType.OBJECT)

    # Access

    def __len__(self) -> int:
        return len(self._children)

    def __getitem__(self, index: int) -> "JsonNode":
        return self._children[index]

    def __iter__(self) -> Iterator["JsonNode"]:
        return iter(list(self._children))

    def _key_index(self, key: Optional[str]) -> Optional[int]:
        wanted = _fold(key)
        for position, child in enumerate(self._children):
            if _fold(child.name) == wanted:
                return position
        return None

    def get(self, key: Optional[str]) -> Optional["JsonNode"]:
        """The first child whose name matches ``key`` ignoring ASCII case, or None."""
        position = self._key_index(key)
        return None if position is None else self._children[position]

    # Mutation

    def append(self, item: Optional["JsonNode"]) -> None:
        """Add ``item`` at the end of the children; None is ignored."""
        if item is None:
            return
        self._children.append(item)

    def add(self, name: str, item: Optional["JsonNode"]) -> None:
        """Give ``item`` the key ``name`` and add it at the end."""
        if item is None:
            return
        item.name = name
        self.append(item)

    def _reference_to(self, item: "JsonNode") -> "JsonNode":
        ref = JsonNode(item.type, item.value)
        ref._children = item._children
        ref.is_reference = True
        return ref

    def append_reference(self, item: "JsonNode") -> None:
        """Add a node that shares ``item``'s contents without taking ``item`` itself."""
        self.append(self._reference_to(item))

    def add_reference(self, name: str, item: "JsonNode") -> None:
        """Add under ``name`` a node sharing ``item``'s contents."""
        self.add(name, self._reference_to(item))

    def detach(self, index: int) -> "JsonNode":
        """Remove and return the child at ``index``; raise IndexError if absent."""
        return self._children.pop(index)

    def detach_key(self, key: str) -> "JsonNode":
        """Remove and return the child named ``key``; raise KeyError if absent."""
        position = self._key_index(key)
        if position is None:
            raise KeyError(key)
        return self._children.pop(position)

    def delete(self, index: int) -> bool:
        """Drop the child at ``index``; return whether one was there."""
        try:
            self.detach(index)
        except IndexError:
            return False
        return True

    def delete_key(self, key: str) -> bool:
        """Drop the child named ``key``; return whether one was there."""
        position = self._key_index(key)
        if position is None:
            return False
        del self._children[position]
        return True

    def replace(self, index: int, item: "JsonNode") -> bool:
        """Put ``item`` in place of the child at ``index``; return whether one was there."""
        try:
            self._children[index] = item
        except IndexError:
            return False
        return True

    def replace_key(self, key: str, item: "JsonNode") -> bool:
        """Put ``item``, named ``key``, in place of the child named ``key``."""
        position = self._key_index(key)
        if position is None:
            return False
        item.name = key
        self._children[position] = item
        return True

    # Conversion

    def to_python(self) -> Any:
        """Plain Python value: None, bool, int, str, list or dict."""
        if self.type is JsonType.NULL:
            return None
        if self.type is JsonType.TRUE:
            return True
        if self.type is JsonType.FALSE:
            return False
        if self.type is JsonType.NUMBER:
            return self.value
        if self.type is JsonType.STRING:
            return self.value
        if self.type is JsonType.ARRAY:
            return [child.to_python() for child in self._children]
        result = {}
        for child in self._children:
            result.setdefault(child.name or "", child.to_python())
        return result

    def __repr__(self) -> str:
        label = f" {self.name!r}:" if self.name is not None else ""
        if self.type in (JsonType.ARRAY, JsonType.OBJECT):
            return f"<JsonNode{label} {self.type.name} len={len(self)}>"
        return f"<JsonNode{label} {self.type.name} {self.value!r}>"