"""
REST-XML protocol.

URI, query-string and header members bind as in REST-JSON; body members
render as an XML document whose root is named after the request shape
and carries the service namespace.
"""
import xml.etree.ElementTree as ET
from typing import Any, Dict, Optional, Type

from protocols.base import HttpResponse, Protocol
from protocols.rest_json import has_body_members, payload_field
from protocols.xml_codec import (
    XmlShapeParser,
    XmlShapeSerializer,
    find_child,
    find_text,
    local_name,
    parse_document,
)
from model.fields import BODY
from utils.exceptions import ResponseParseError, ServiceError
from utils.wire_formats import ISO8601

XML_CONTENT_TYPE = "application/xml"


def xml_root_name(shape: Any) -> str:
    return getattr(type(shape), "XML_ROOT", None) or type(shape).__name__


class RestXmlProtocol(Protocol):
    """restXml protocol with the service's XML namespace."""

    name = "rest-xml"
    default_timestamp_format = ISO8601
    request_id_header = "x-amz-request-id"

    def __init__(self, xml_namespace: Optional[str] = None):
        self.xml_namespace = xml_namespace
        self.parser = XmlShapeParser()
        self.serializer = XmlShapeSerializer(timestamp_format=ISO8601)

    def _document(self, root_name: str, shape: Any) -> bytes:
        root = ET.Element(root_name)
        if self.xml_namespace:
            root.set("xmlns", self.xml_namespace)
        self.serializer.serialize_shape(shape, root)
        return ET.tostring(root, encoding="utf-8", xml_declaration=True)

    def payload_bytes(self, request: Any) -> bytes:
        name, field = payload_field(type(request))
        if field is not None:
            if not request.is_set(name):
                return b""
            value = getattr(request, name)
            if field.type_name == "structure":
                return self._document(field.wire_name, value)
            if isinstance(value, str):
                return value.encode('utf-8')
            return bytes(value)
        if not any(f.location == BODY for _, f, _ in request.present_items()):
            return b""
        return self._document(xml_root_name(request), request)

    def headers(self, request: Any) -> Dict[str, str]:
        headers = super().headers(request)
        name, field = payload_field(type(request))
        if field is not None and field.type_name == "blob":
            if request.is_set(name):
                headers.setdefault("Content-Type", "application/octet-stream")
        elif self.payload_bytes(request):
            headers.setdefault("Content-Type", XML_CONTENT_TYPE)
        return headers

    def parse_result(self, result_cls: type, response: HttpResponse) -> Any:
        name, field = payload_field(result_cls)
        if field is not None:
            result = result_cls()
            if field.type_name == "structure":
                if response.body and response.body.strip():
                    setattr(result, name, self.parser.parse_shape(field.shape_cls, parse_document(response.body)))
            elif field.type_name == "blob":
                setattr(result, name, response.body)
            elif response.body:
                setattr(result, name, field.coerce(response.text))
        elif has_body_members(result_cls) and response.body and response.body.strip():
            result = self.parser.parse_shape(result_cls, parse_document(response.body))
        else:
            result = result_cls()
        self.bind_response_members(result, response)
        return result

    def parse_error(self, response: HttpResponse, errors: Optional[Dict[str, Type[ServiceError]]] = None) -> ServiceError:
        try:
            root = parse_document(response.body) if response.body else None
        except ResponseParseError:
            root = None
        error = root
        if root is not None and local_name(root.tag) != "Error":
            error = find_child(root, "Error")
        data = {}
        if error is not None:
            data = {local_name(child.tag): (child.text or "").strip() for child in error}
        request_id = find_text(error, "RequestId") or find_text(root, "RequestId")
        return self.build_error(
            find_text(error, "Code"),
            find_text(error, "Message") or "",
            response,
            data=data,
            errors=errors,
            request_id=request_id,
        )
