"""
Request model base class.

A request is a Shape that knows its operation name, its HTTP binding and
the protocol its service speaks. Every wire rendering hook delegates to
that protocol, so operation classes only declare fields.
"""
from dataclasses import dataclass
from typing import Any, ClassVar, Dict, List, Optional, Tuple
from urllib.parse import urlencode

from model.fields import HEADER, URI
from model.shape import Shape
from utils.wire_formats import percent_encode


@dataclass(frozen=True)
class HttpBinding:
    """HTTP method, request URI template and optional host prefix of an operation."""

    method: str = "POST"
    request_uri: str = "/"
    host_prefix: Optional[str] = None


def append_query(uri: str, params: List[Tuple[str, str]]) -> str:
    """Append encoded query parameters to a URI that may already carry some."""
    if not params:
        return uri
    query = urlencode(params, quote_via=lambda value, *_: percent_encode(value))
    separator = "&" if "?" in uri else "?"
    return f"{uri}{separator}{query}"


class ServiceRequest(Shape):
    """
    Capability interface every operation request implements.

    Service base requests set PROTOCOL; operation requests set
    OPERATION_NAME and, for REST protocols, HTTP.
    """

    OPERATION_NAME: ClassVar[str] = ""
    HTTP: ClassVar[HttpBinding] = HttpBinding()
    PROTOCOL: ClassVar[Any] = None

    def get_service_request_name(self) -> str:
        """Literal operation name used for routing and signing."""
        return self.OPERATION_NAME

    def serialize_payload(self) -> str:
        """Wire body of this request; unset members never appear."""
        return self.PROTOCOL.serialize_payload(self)

    def get_request_specific_headers(self) -> Dict[str, str]:
        return self.PROTOCOL.headers(self)

    def get_query_string_parameters(self) -> List[Tuple[str, str]]:
        return self.PROTOCOL.query_params(self)

    def add_query_string_parameters(self, uri: str) -> str:
        """Return `uri` with the present query-string members appended."""
        return append_query(uri, self.get_query_string_parameters())

    def dump_body_to_url(self, uri: str) -> str:
        """Return `uri` with the form body appended, for protocols that support it."""
        return self.PROTOCOL.dump_body_to_url(self, uri)

    def resolve_request_uri(self) -> str:
        """Request URI with the present URI labels substituted and percent-encoded."""
        template = self.HTTP.request_uri
        path, _, static_query = template.partition("?")
        for name, field, value in self.present_items():
            if field.location != URI:
                continue
            text = self.PROTOCOL.format_scalar(field, value, location=URI)
            greedy = "{%s+}" % field.wire_name
            if greedy in path:
                path = path.replace(greedy, percent_encode(text, safe="/"))
            else:
                path = path.replace("{%s}" % field.wire_name, percent_encode(text))
        if static_query:
            return f"{path}?{static_query}"
        return path

    def get_endpoint_context_params(self) -> Dict[str, str]:
        return {
            field.context_param: str(value)
            for _, field, value in self.present_items()
            if field.context_param
        }

    def missing_required_fields(self) -> List[str]:
        """
        Names of required members the request cannot be sent without.

        Only URI labels, headers and host labels are checked here; body
        validation is left to the service.
        """
        missing = []
        for name, field in self._fields.items():
            if not field.required or self.is_set(name):
                continue
            if field.location in (URI, HEADER) or field.context_param:
                missing.append(name)
        return missing
