"""
AWS JSON 1.0 / 1.1 protocol.

Every operation is a POST to "/" with the operation named in the
X-Amz-Target header and all members in a JSON body.
"""
import json
from typing import Any, Dict, Optional, Type

from model.json_codec import jsonize, parse_json
from protocols.base import HttpResponse, Protocol
from utils.exceptions import ResponseParseError, ServiceError


def load_json_body(response: HttpResponse) -> Dict[str, Any]:
    """Decode a JSON response body; an empty body is an empty document."""
    if not response.body or not response.body.strip():
        return {}
    try:
        data = json.loads(response.body)
    except ValueError as e:
        raise ResponseParseError(f"Response body is not valid JSON: {str(e)}", body=response.body) from e
    if not isinstance(data, dict):
        raise ResponseParseError("Response body is not a JSON object", body=response.body)
    return data


def dumps(document: Dict[str, Any]) -> bytes:
    return json.dumps(document, separators=(",", ":")).encode('utf-8')


def error_code_from(response: HttpResponse, data: Dict[str, Any]) -> Optional[str]:
    """
    Error code from the x-amzn-ErrorType header or the body's __type/code.

    Header values look like "Code:http://internal.amazon.com/..." and body
    values may be namespaced as "aws.protocoltests#Code".
    """
    raw = response.headers.get("x-amzn-ErrorType") or data.get("__type") or data.get("code")
    if not raw:
        return None
    raw = raw.split(":", 1)[0]
    return raw.rsplit("#", 1)[-1]


def error_message_from(data: Dict[str, Any]) -> str:
    for key in ("message", "Message", "errorMessage"):
        if data.get(key):
            return str(data[key])
    return ""


class JsonProtocol(Protocol):
    """awsJson protocol bound to one service's target prefix."""

    name = "json"

    def __init__(self, target_prefix: str, json_version: str = "1.1"):
        self.target_prefix = target_prefix
        self.json_version = json_version

    @property
    def content_type(self) -> str:
        return f"application/x-amz-json-{self.json_version}"

    def payload_bytes(self, request: Any) -> bytes:
        return dumps(jsonize(request, self.default_timestamp_format))

    def headers(self, request: Any) -> Dict[str, str]:
        headers = super().headers(request)
        headers["X-Amz-Target"] = f"{self.target_prefix}.{request.get_service_request_name()}"
        headers["Content-Type"] = self.content_type
        return headers

    def parse_result(self, result_cls: type, response: HttpResponse) -> Any:
        result = parse_json(result_cls, load_json_body(response))
        self.bind_response_members(result, response)
        return result

    def parse_error(self, response: HttpResponse, errors: Optional[Dict[str, Type[ServiceError]]] = None) -> ServiceError:
        try:
            data = load_json_body(response)
        except ResponseParseError:
            data = {}
        return self.build_error(
            error_code_from(response, data),
            error_message_from(data),
            response,
            data=data,
            errors=errors,
        )
