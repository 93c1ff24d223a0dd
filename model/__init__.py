"""
Modeling layer: field descriptors, shapes, requests and results.
"""
from model.fields import (
    Blob,
    Boolean,
    EnumField,
    Float,
    Integer,
    List,
    Map,
    String,
    Structure,
    Timestamp,
)
from model.request import HttpBinding, ServiceRequest
from model.result import EmptyResult, ResponseMetadata, ServiceResult
from model.shape import Shape

__all__ = [
    "Blob",
    "Boolean",
    "EmptyResult",
    "EnumField",
    "Float",
    "HttpBinding",
    "Integer",
    "List",
    "Map",
    "ResponseMetadata",
    "ServiceRequest",
    "ServiceResult",
    "Shape",
    "String",
    "Structure",
    "Timestamp",
]
