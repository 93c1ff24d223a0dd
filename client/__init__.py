"""
Client layer: endpoint resolution, signing, transport and dispatch.
"""
from client.base import Outcome, ServiceClient, ServiceMetadata
from client.endpoint import EndpointProvider
from client.signer import RequestSigner
from client.transport import HttpTransport

__all__ = [
    "EndpointProvider",
    "HttpTransport",
    "Outcome",
    "RequestSigner",
    "ServiceClient",
    "ServiceMetadata",
]
