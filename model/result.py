"""
Result model base class.
"""
from dataclasses import dataclass, field
from typing import Dict, Optional

from model.shape import Shape


@dataclass
class ResponseMetadata:
    """Transport details of the response a result was parsed from."""

    request_id: Optional[str] = None
    http_status_code: int = 0
    headers: Dict[str, str] = field(default_factory=dict)


class ServiceResult(Shape):
    """
    Parsed output of one operation.

    Members the service did not return read back as their defaults.
    """

    def __init__(self, **values) -> None:
        super().__init__(**values)
        self.response_metadata = ResponseMetadata()


class EmptyResult(ServiceResult):
    """Result of operations whose output carries no members."""
