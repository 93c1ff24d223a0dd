"""
Field descriptors for modeled shapes.

A field describes one member of a request, result or nested type: its
Python attribute name, its wire name, where it binds on the HTTP message
and how its values are typed. Reading an unset field returns the field's
default without marking it present; assigning marks it present and
assigning None clears it.
"""
import copy
from enum import Enum
from typing import Any, Optional, Type

BODY = "body"
URI = "uri"
QUERYSTRING = "querystring"
HEADER = "header"
HEADERS = "headers"
STATUS_CODE = "statusCode"

LOCATIONS = {BODY, URI, QUERYSTRING, HEADER, HEADERS, STATUS_CODE}


class Field:
    """Base descriptor shared by every field kind."""

    type_name = "field"

    def __init__(
        self,
        wire_name: Optional[str] = None,
        *,
        location: str = BODY,
        required: bool = False,
        idempotency_token: bool = False,
        payload: bool = False,
        timestamp_format: Optional[str] = None,
        context_param: Optional[str] = None,
        ec2_name: Optional[str] = None,
    ):
        if location not in LOCATIONS:
            raise ValueError(f"Unknown field location: {location}")
        self.wire_name = wire_name
        self.location = location
        self.required = required
        self.idempotency_token = idempotency_token
        self.payload = payload
        self.timestamp_format = timestamp_format
        self.context_param = context_param
        self.ec2_name = ec2_name
        self.name: Optional[str] = None

    def __set_name__(self, owner: type, name: str) -> None:
        self.name = name
        if self.wire_name is None:
            self.wire_name = name

    def __get__(self, instance: Any, owner: type) -> Any:
        """
        Current value, or a fresh default when unset.

        The default is not stored, so mutating it in place (appending to an
        unset list, say) is lost. Populate members by assignment or add_*.
        """
        if instance is None:
            return self
        try:
            return instance._values[self.name]
        except KeyError:
            return self.default()

    def __set__(self, instance: Any, value: Any) -> None:
        # None means absent
        if value is None:
            instance._values.pop(self.name, None)
            return
        instance._values[self.name] = self.coerce(value)

    def __delete__(self, instance: Any) -> None:
        instance._values.pop(self.name, None)

    def default(self) -> Any:
        return None

    def coerce(self, value: Any) -> Any:
        return value

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.wire_name!r}, location={self.location!r})"


class String(Field):
    type_name = "string"

    def default(self) -> str:
        return ""


class Integer(Field):
    """Integer or long member."""

    type_name = "integer"

    def default(self) -> int:
        return 0


class Float(Field):
    """Float or double member."""

    type_name = "float"

    def default(self) -> float:
        return 0.0


class Boolean(Field):
    type_name = "boolean"

    def default(self) -> bool:
        return False


class Timestamp(Field):
    type_name = "timestamp"


class Blob(Field):
    type_name = "blob"

    def default(self) -> bytes:
        return b""


class EnumField(Field):
    """
    Member restricted to a modeled enumeration.

    Values the enumeration does not know (a service may add values later)
    are kept as plain strings instead of failing.
    """

    type_name = "enum"

    def __init__(self, wire_name: Optional[str] = None, enum_cls: Optional[Type[Enum]] = None, **kwargs: Any):
        super().__init__(wire_name, **kwargs)
        self.enum_cls = enum_cls

    def coerce(self, value: Any) -> Any:
        if value is None or isinstance(value, Enum) or self.enum_cls is None:
            return value
        try:
            return self.enum_cls(value)
        except ValueError:
            return value


class Structure(Field):
    """Nested shape, owned by value by its parent."""

    type_name = "structure"

    def __init__(self, wire_name: Optional[str] = None, shape_cls: Optional[type] = None, **kwargs: Any):
        super().__init__(wire_name, **kwargs)
        self.shape_cls = shape_cls

    def default(self) -> Any:
        return self.shape_cls()

    def coerce(self, value: Any) -> Any:
        if value is None:
            return value
        return copy.deepcopy(value)


class List(Field):
    """
    Ordered sequence of members described by another field.

    member_name is the XML/query element name of each entry; flattened
    lists repeat the list's own name instead of nesting member elements.
    """

    type_name = "list"

    def __init__(
        self,
        wire_name: Optional[str] = None,
        member: Optional[Field] = None,
        *,
        member_name: str = "member",
        flattened: bool = False,
        **kwargs: Any,
    ):
        super().__init__(wire_name, **kwargs)
        self.member = member if member is not None else String()
        self.member_name = member_name
        self.flattened = flattened

    def default(self) -> list:
        return []

    def coerce(self, value: Any) -> Any:
        if value is None:
            return value
        return [self.member.coerce(item) for item in value]


class Map(Field):
    """Key to value mapping; keys are unique and order carries no meaning."""

    type_name = "map"

    def __init__(
        self,
        wire_name: Optional[str] = None,
        key: Optional[Field] = None,
        value: Optional[Field] = None,
        *,
        key_name: str = "key",
        value_name: str = "value",
        flattened: bool = False,
        **kwargs: Any,
    ):
        super().__init__(wire_name, **kwargs)
        self.key = key if key is not None else String()
        self.value = value if value is not None else String()
        self.key_name = key_name
        self.value_name = value_name
        self.flattened = flattened

    def default(self) -> dict:
        return {}

    def coerce(self, value: Any) -> Any:
        if value is None:
            return value
        return {self.key.coerce(k): self.value.coerce(v) for k, v in dict(value).items()}
