"""
AWS Query and EC2 protocols.

Requests are form-encoded POST bodies naming the Action and API Version;
nested members flatten into dotted keys. Responses and errors are XML.
"""
from typing import Any, Dict, List, Optional, Tuple, Type
from urllib.parse import urlencode

from model.fields import BODY, QUERYSTRING, Field
from model.request import append_query
from protocols.base import HttpResponse, Protocol
from protocols.xml_codec import (
    XmlShapeParser,
    find_child,
    find_text,
    local_name,
    parse_document,
)
from utils.exceptions import ResponseParseError, ServiceError
from utils.wire_formats import ISO8601, percent_encode

FORM_CONTENT_TYPE = "application/x-www-form-urlencoded; charset=utf-8"


class QueryProtocol(Protocol):
    """awsQuery protocol for one service API version."""

    name = "query"
    default_timestamp_format = ISO8601
    request_id_header = "x-amzn-RequestId"

    def __init__(self, api_version: str):
        self.api_version = api_version
        self.parser = XmlShapeParser()

    # Request rendering

    def form_params(self, request: Any) -> List[Tuple[str, str]]:
        params = [
            ("Action", request.get_service_request_name()),
            ("Version", self.api_version),
        ]
        self.serialize_members(request, "", params)
        return params

    def serialize_members(self, shape: Any, prefix: str, params: List[Tuple[str, str]]) -> None:
        for _, field, value in shape.present_items():
            if field.location != BODY:
                continue
            key = self.member_key(field)
            self.serialize_value(field, value, f"{prefix}.{key}" if prefix else key, params)

    def member_key(self, field: Field) -> str:
        return field.wire_name

    def serialize_value(self, field: Field, value: Any, prefix: str, params: List[Tuple[str, str]]) -> None:
        type_name = field.type_name
        if type_name == "structure":
            self.serialize_members(value, prefix, params)
        elif type_name == "list":
            if not value:
                params.append((prefix, ""))
                return
            for index, item in enumerate(value, start=1):
                self.serialize_value(field.member, item, self.list_item_key(field, prefix, index), params)
        elif type_name == "map":
            entry_prefix = prefix if field.flattened else f"{prefix}.entry"
            for index, (key, item) in enumerate(value.items(), start=1):
                self.serialize_value(field.key, key, f"{entry_prefix}.{index}.{field.key_name}", params)
                self.serialize_value(field.value, item, f"{entry_prefix}.{index}.{field.value_name}", params)
        else:
            params.append((prefix, self.format_scalar(field, value, location=QUERYSTRING)))

    def list_item_key(self, field: Field, prefix: str, index: int) -> str:
        if field.flattened:
            return f"{prefix}.{index}"
        return f"{prefix}.{field.member_name}.{index}"

    def payload_bytes(self, request: Any) -> bytes:
        return urlencode(
            self.form_params(request),
            quote_via=lambda value, *_: percent_encode(value),
        ).encode('utf-8')

    def headers(self, request: Any) -> Dict[str, str]:
        headers = super().headers(request)
        headers["Content-Type"] = FORM_CONTENT_TYPE
        return headers

    def dump_body_to_url(self, request: Any, uri: str) -> str:
        return append_query(uri, self.form_params(request))

    # Response parsing

    def result_element(self, root: Any, operation: str) -> Any:
        return find_child(root, f"{operation}Result")

    def parse_result(self, result_cls: type, response: HttpResponse) -> Any:
        if not response.body or not response.body.strip():
            result = result_cls()
            self.bind_response_members(result, response)
            return result
        root = parse_document(response.body)
        operation = local_name(root.tag)
        if operation.endswith("Response"):
            operation = operation[:-len("Response")]
        result = self.parser.parse_shape(result_cls, self.result_element(root, operation))
        result.response_metadata.request_id = self.document_request_id(root)
        self.bind_response_members(result, response)
        return result

    def document_request_id(self, root: Any) -> Optional[str]:
        return find_text(find_child(root, "ResponseMetadata"), "RequestId")

    def parse_error(self, response: HttpResponse, errors: Optional[Dict[str, Type[ServiceError]]] = None) -> ServiceError:
        try:
            root = parse_document(response.body) if response.body else None
        except ResponseParseError:
            root = None
        error = self.error_element(root)
        code = find_text(error, "Code")
        message = find_text(error, "Message") or ""
        data = {}
        if error is not None:
            data = {local_name(child.tag): (child.text or "").strip() for child in error}
        return self.build_error(
            code,
            message,
            response,
            data=data,
            errors=errors,
            request_id=self.error_request_id(root),
        )

    def error_element(self, root: Any) -> Any:
        if root is None:
            return None
        if local_name(root.tag) == "Error":
            return root
        return find_child(root, "Error")

    def error_request_id(self, root: Any) -> Optional[str]:
        return find_text(root, "RequestId")


class Ec2Protocol(QueryProtocol):
    """
    EC2 flavour of the query protocol.

    Request lists are always flattened, request keys use the ec2 name or
    the capitalized wire name, response lists wrap entries in <item> and
    response members sit directly under the root element.
    """

    name = "ec2"
    request_id_header = "x-amzn-RequestId"

    def __init__(self, api_version: str):
        super().__init__(api_version)
        self.parser = XmlShapeParser(list_member_name="item")

    def member_key(self, field: Field) -> str:
        if field.ec2_name:
            return field.ec2_name
        name = field.wire_name
        return name[:1].upper() + name[1:]

    def list_item_key(self, field: Field, prefix: str, index: int) -> str:
        return f"{prefix}.{index}"

    def serialize_value(self, field: Field, value: Any, prefix: str, params: List[Tuple[str, str]]) -> None:
        # EC2 drops empty lists instead of sending an empty key
        if field.type_name == "list" and not value:
            return
        super().serialize_value(field, value, prefix, params)

    def result_element(self, root: Any, operation: str) -> Any:
        return root

    def document_request_id(self, root: Any) -> Optional[str]:
        return find_text(root, "requestId")

    def error_element(self, root: Any) -> Any:
        if root is None:
            return None
        return find_child(find_child(root, "Errors"), "Error")

    def error_request_id(self, root: Any) -> Optional[str]:
        return find_text(root, "RequestID")
