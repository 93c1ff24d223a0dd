"""
XML rendering and parsing of modeled shapes, shared by query, ec2 and rest-xml.
"""
import xml.etree.ElementTree as ET
from enum import Enum
from typing import Any, Dict, List, Optional

from model.fields import BODY, Field
from utils.exceptions import ResponseParseError
from utils.wire_formats import (
    decode_blob,
    encode_blob,
    format_bool,
    format_timestamp,
    parse_bool,
    parse_timestamp,
    ISO8601,
)


def local_name(tag: str) -> str:
    """Tag name without its {namespace} prefix."""
    return tag.rsplit("}", 1)[-1]


def parse_document(body: bytes) -> ET.Element:
    try:
        return ET.fromstring(body)
    except ET.ParseError as e:
        raise ResponseParseError(f"Response body is not valid XML: {str(e)}", body=body) from e


def find_child(element: Optional[ET.Element], name: str) -> Optional[ET.Element]:
    if element is None:
        return None
    for child in element:
        if local_name(child.tag) == name:
            return child
    return None


def find_text(element: Optional[ET.Element], name: str) -> Optional[str]:
    child = find_child(element, name)
    if child is None:
        return None
    return (child.text or "").strip()


def _children_by_name(element: ET.Element) -> Dict[str, List[ET.Element]]:
    groups: Dict[str, List[ET.Element]] = {}
    for child in element:
        groups.setdefault(local_name(child.tag), []).append(child)
    return groups


class XmlShapeParser:
    """
    Shape-guided XML parser.

    list_member_name overrides every list's member element name; EC2
    responses always wrap list entries in <item>.
    """

    def __init__(self, list_member_name: Optional[str] = None):
        self.list_member_name = list_member_name

    def parse_shape(self, shape_cls: type, element: Optional[ET.Element]) -> Any:
        shape = shape_cls()
        if element is None:
            return shape
        groups = _children_by_name(element)
        for name, field in shape_cls._fields.items():
            if field.location != BODY:
                continue
            nodes = groups.get(field.wire_name)
            if not nodes:
                continue
            if field.type_name == "list" and field.flattened:
                setattr(shape, name, [self.parse_value(field.member, node) for node in nodes])
            elif field.type_name == "map" and field.flattened:
                setattr(shape, name, self._parse_entries(field, nodes))
            else:
                setattr(shape, name, self.parse_value(field, nodes[0]))
        return shape

    def parse_value(self, field: Field, element: ET.Element) -> Any:
        type_name = field.type_name
        if type_name == "structure":
            return self.parse_shape(field.shape_cls, element)
        if type_name == "list":
            member_name = self.list_member_name or field.member_name
            return [
                self.parse_value(field.member, child)
                for child in element
                if local_name(child.tag) == member_name
            ]
        if type_name == "map":
            entries = [child for child in element if local_name(child.tag) == "entry"]
            return self._parse_entries(field, entries)
        text = (element.text or "").strip()
        if type_name == "timestamp":
            return parse_timestamp(text) if text else None
        if type_name == "blob":
            return decode_blob(text)
        if type_name == "integer":
            return int(text) if text else 0
        if type_name == "float":
            return float(text) if text else 0.0
        if type_name == "boolean":
            return parse_bool(text)
        return field.coerce(text)

    def _parse_entries(self, field: Field, entries: List[ET.Element]) -> Dict[Any, Any]:
        parsed = {}
        for entry in entries:
            key_node = find_child(entry, field.key_name)
            value_node = find_child(entry, field.value_name)
            if key_node is None or value_node is None:
                continue
            key = self.parse_value(field.key, key_node)
            parsed[key] = self.parse_value(field.value, value_node)
        return parsed


class XmlShapeSerializer:
    """Render the present body members of a shape as child elements."""

    def __init__(self, timestamp_format: str = ISO8601):
        self.timestamp_format = timestamp_format

    def serialize_shape(self, shape: Any, parent: ET.Element) -> ET.Element:
        for _, field, value in shape.present_items():
            if field.location != BODY:
                continue
            self.append_value(parent, field.wire_name, field, value)
        return parent

    def append_value(self, parent: ET.Element, tag: str, field: Field, value: Any) -> None:
        type_name = field.type_name
        if type_name == "list":
            if field.flattened:
                for item in value:
                    self.append_value(parent, tag, field.member, item)
                return
            container = ET.SubElement(parent, tag)
            for item in value:
                self.append_value(container, field.member_name, field.member, item)
            return
        if type_name == "map":
            container = parent if field.flattened else ET.SubElement(parent, tag)
            for key, item in value.items():
                entry = ET.SubElement(container, tag if field.flattened else "entry")
                self.append_value(entry, field.key_name, field.key, key)
                self.append_value(entry, field.value_name, field.value, item)
            return
        node = ET.SubElement(parent, tag)
        if type_name == "structure":
            self.serialize_shape(value, node)
        else:
            node.text = self.format_text(field, value)

    def format_text(self, field: Field, value: Any) -> str:
        type_name = field.type_name
        if type_name == "timestamp":
            return str(format_timestamp(value, field.timestamp_format or self.timestamp_format))
        if type_name == "boolean":
            return format_bool(value)
        if type_name == "blob":
            return encode_blob(value)
        if isinstance(value, Enum):
            return str(value.value)
        return str(value)
