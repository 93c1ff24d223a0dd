"""
Amazon Comprehend (JSON 1.1 protocol).
"""
from enum import Enum

from client.base import ServiceClient, ServiceMetadata
from model import (
    EmptyResult,
    EnumField,
    Float,
    List,
    ServiceRequest,
    ServiceResult,
    Shape,
    String,
    Structure,
)
from protocols.json_rpc import JsonProtocol
from utils.decorators import service_operation
from utils.exceptions import ServiceError

METADATA = ServiceMetadata(
    service_name="Comprehend",
    endpoint_prefix="comprehend",
    signing_name="comprehend",
    api_version="2017-11-27",
)


class LanguageCode(str, Enum):
    EN = "en"
    ES = "es"
    FR = "fr"
    DE = "de"
    IT = "it"
    PT = "pt"
    AR = "ar"
    HI = "hi"
    JA = "ja"
    KO = "ko"
    ZH = "zh"
    ZH_TW = "zh-TW"


class JobStatus(str, Enum):
    SUBMITTED = "SUBMITTED"
    IN_PROGRESS = "IN_PROGRESS"
    COMPLETED = "COMPLETED"
    FAILED = "FAILED"
    STOP_REQUESTED = "STOP_REQUESTED"
    STOPPED = "STOPPED"


class PiiEntityType(str, Enum):
    """Common PII entity types; newer types come back as plain strings."""

    BANK_ACCOUNT_NUMBER = "BANK_ACCOUNT_NUMBER"
    BANK_ROUTING = "BANK_ROUTING"
    CREDIT_DEBIT_NUMBER = "CREDIT_DEBIT_NUMBER"
    CREDIT_DEBIT_CVV = "CREDIT_DEBIT_CVV"
    CREDIT_DEBIT_EXPIRY = "CREDIT_DEBIT_EXPIRY"
    PIN = "PIN"
    EMAIL = "EMAIL"
    ADDRESS = "ADDRESS"
    NAME = "NAME"
    PHONE = "PHONE"
    SSN = "SSN"
    DATE_TIME = "DATE_TIME"
    PASSPORT_NUMBER = "PASSPORT_NUMBER"
    DRIVER_ID = "DRIVER_ID"
    URL = "URL"
    AGE = "AGE"
    USERNAME = "USERNAME"
    PASSWORD = "PASSWORD"
    AWS_ACCESS_KEY = "AWS_ACCESS_KEY"
    AWS_SECRET_KEY = "AWS_SECRET_KEY"
    IP_ADDRESS = "IP_ADDRESS"
    MAC_ADDRESS = "MAC_ADDRESS"
    ALL = "ALL"


class EntityLabel(Shape):
    name = EnumField("Name", PiiEntityType)
    score = Float("Score")


class Tag(Shape):
    key = String("Key")
    value = String("Value")


class ComprehendRequest(ServiceRequest):
    PROTOCOL = JsonProtocol("Comprehend_20171127", json_version="1.1")


class ContainsPiiEntitiesRequest(ComprehendRequest):
    OPERATION_NAME = "ContainsPiiEntities"

    text = String("Text", required=True)
    language_code = EnumField("LanguageCode", LanguageCode, required=True)


class ContainsPiiEntitiesResult(ServiceResult):
    labels = List("Labels", Structure(shape_cls=EntityLabel))


class StopDominantLanguageDetectionJobRequest(ComprehendRequest):
    OPERATION_NAME = "StopDominantLanguageDetectionJob"

    job_id = String("JobId", required=True)


class StopDominantLanguageDetectionJobResult(ServiceResult):
    job_id = String("JobId")
    job_status = EnumField("JobStatus", JobStatus)


class TagResourceRequest(ComprehendRequest):
    """Attach tags to a Comprehend resource; keys are unique per resource."""

    OPERATION_NAME = "TagResource"

    resource_arn = String("ResourceArn", required=True)
    tags = List("Tags", Structure(shape_cls=Tag), required=True)


class InternalServerException(ServiceError):
    pass


class InvalidRequestException(ServiceError):
    pass


class TextSizeLimitExceededException(ServiceError):
    pass


class UnsupportedLanguageException(ServiceError):
    pass


class JobNotFoundException(ServiceError):
    pass


class ResourceNotFoundException(ServiceError):
    pass


class ConcurrentModificationException(ServiceError):
    pass


class TooManyTagsException(ServiceError):
    pass


class ComprehendClient(ServiceClient):
    METADATA = METADATA
    ERRORS = {
        error.__name__: error
        for error in (
            InternalServerException,
            InvalidRequestException,
            TextSizeLimitExceededException,
            UnsupportedLanguageException,
            JobNotFoundException,
            ResourceNotFoundException,
            ConcurrentModificationException,
            TooManyTagsException,
        )
    }

    @service_operation
    def contains_pii_entities(self, request: ContainsPiiEntitiesRequest) -> ContainsPiiEntitiesResult:
        return self.make_request(request, ContainsPiiEntitiesResult)

    @service_operation
    def stop_dominant_language_detection_job(
        self, request: StopDominantLanguageDetectionJobRequest
    ) -> StopDominantLanguageDetectionJobResult:
        return self.make_request(request, StopDominantLanguageDetectionJobResult)

    @service_operation
    def tag_resource(self, request: TagResourceRequest) -> EmptyResult:
        return self.make_request(request, EmptyResult)
