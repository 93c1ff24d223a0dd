"""
Wire protocols: how a modeled request becomes an HTTP request and how an
HTTP response becomes a result or an error.
"""
from protocols.base import HttpRequest, HttpResponse, Protocol
from protocols.json_rpc import JsonProtocol
from protocols.query import Ec2Protocol, QueryProtocol
from protocols.rest_json import RestJsonProtocol
from protocols.rest_xml import RestXmlProtocol

__all__ = [
    "Ec2Protocol",
    "HttpRequest",
    "HttpResponse",
    "JsonProtocol",
    "Protocol",
    "QueryProtocol",
    "RestJsonProtocol",
    "RestXmlProtocol",
]
