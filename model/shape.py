"""
Base class for every modeled shape.

Subclasses declare their members as Field descriptors. For each member
`foo` the class gains a fluent `with_foo(value)` builder, and list or map
members also get `add_foo(...)`. Presence is tracked in one value store:
a member is set once it has been assigned and unset after `del` or after
assigning None. Unset list, map and structure members read as throwaway
defaults; populate them through assignment or the builders.
"""
import copy
import uuid
from typing import Any, ClassVar, Dict, Iterator, Tuple

from model.fields import Field
from model.json_codec import jsonize, parse_json


def _make_with(name: str):
    def with_value(self, value):
        setattr(self, name, value)
        return self
    with_value.__name__ = f"with_{name}"
    with_value.__doc__ = f"Set `{name}` and return this instance."
    return with_value


def _make_add_item(name: str, field):
    def add_item(self, item):
        items = self._values.setdefault(name, [])
        items.append(field.member.coerce(item))
        return self
    add_item.__name__ = f"add_{name}"
    add_item.__doc__ = f"Append one entry to `{name}` and return this instance."
    return add_item


def _make_add_entry(name: str, field):
    def add_entry(self, key, value):
        entries = self._values.setdefault(name, {})
        entries[field.key.coerce(key)] = field.value.coerce(value)
        return self
    add_entry.__name__ = f"add_{name}"
    add_entry.__doc__ = f"Insert one key/value pair into `{name}` and return this instance."
    return add_entry


class Shape:
    """A modeled value object with per-member presence tracking."""

    _fields: ClassVar[Dict[str, Field]] = {}

    def __init_subclass__(cls, **kwargs: Any) -> None:
        super().__init_subclass__(**kwargs)
        fields: Dict[str, Field] = {}
        for klass in reversed(cls.__mro__):
            for name, attr in vars(klass).items():
                if isinstance(attr, Field):
                    fields[name] = attr
        cls._fields = fields

        for name, field in list(vars(cls).items()):
            if not isinstance(field, Field):
                continue
            if f"with_{name}" not in vars(cls):
                setattr(cls, f"with_{name}", _make_with(name))
            if f"add_{name}" in vars(cls):
                continue
            if field.type_name == "list":
                setattr(cls, f"add_{name}", _make_add_item(name, field))
            elif field.type_name == "map":
                setattr(cls, f"add_{name}", _make_add_entry(name, field))

    def __init__(self, **values: Any) -> None:
        self._values: Dict[str, Any] = {}
        for name, field in self._fields.items():
            if field.idempotency_token and values.get(name) is None:
                self._values[name] = str(uuid.uuid4())
        for name, value in values.items():
            if name not in self._fields:
                raise TypeError(
                    f"{type(self).__name__} got an unexpected field '{name}'"
                )
            setattr(self, name, value)

    @classmethod
    def fields(cls) -> Dict[str, Field]:
        return dict(cls._fields)

    def is_set(self, name: str) -> bool:
        """True if the member was explicitly set on this instance."""
        if name not in self._fields:
            raise AttributeError(f"{type(self).__name__} has no field '{name}'")
        return name in self._values

    def set_fields(self) -> list:
        return [name for name in self._fields if name in self._values]

    def present_items(self) -> Iterator[Tuple[str, Field, Any]]:
        """Yield (name, field, value) for every present member in declaration order."""
        for name, field in self._fields.items():
            if name in self._values:
                yield name, field, self._values[name]

    def jsonize(self) -> Dict[str, Any]:
        """JSON view of the present body members, keyed by wire name."""
        return jsonize(self)

    @classmethod
    def from_json(cls, data: Dict[str, Any]):
        """Build an instance from a JSON view; absent keys stay unset."""
        return parse_json(cls, data)

    def clone(self):
        """Independent deep copy of this instance, keeping its concrete type."""
        return copy.deepcopy(self)

    def __eq__(self, other: Any) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return self._values == other._values

    __hash__ = None

    def __repr__(self) -> str:
        members = ", ".join(f"{name}={value!r}" for name, _, value in self.present_items())
        return f"{type(self).__name__}({members})"
