"""
Amazon Athena notebook, executor and prepared statement operations (JSON 1.1 protocol).
"""
from enum import Enum

from client.base import ServiceClient, ServiceMetadata
from model import (
    EmptyResult,
    EnumField,
    Integer,
    List,
    ServiceRequest,
    ServiceResult,
    Shape,
    String,
    Structure,
    Timestamp,
)
from protocols.json_rpc import JsonProtocol
from utils.decorators import service_operation
from utils.exceptions import ServiceError

METADATA = ServiceMetadata(
    service_name="Athena",
    endpoint_prefix="athena",
    signing_name="athena",
    api_version="2017-05-18",
)


class NotebookType(str, Enum):
    IPYNB = "IPYNB"


class ExecutorState(str, Enum):
    CREATING = "CREATING"
    CREATED = "CREATED"
    REGISTERED = "REGISTERED"
    TERMINATING = "TERMINATING"
    TERMINATED = "TERMINATED"
    FAILED = "FAILED"


class ExecutorType(str, Enum):
    COORDINATOR = "COORDINATOR"
    GATEWAY = "GATEWAY"
    WORKER = "WORKER"


class NotebookMetadata(Shape):
    notebook_id = String("NotebookId")
    name = String("Name")
    work_group = String("WorkGroup")
    creation_time = Timestamp("CreationTime")
    type = EnumField("Type", NotebookType)
    last_modified_time = Timestamp("LastModifiedTime")


class ApplicationDPUSizes(Shape):
    """DPU sizes a Spark application runtime supports."""

    application_runtime_id = String("ApplicationRuntimeId")
    supported_dpu_sizes = List("SupportedDPUSizes", Integer())


class ExecutorsSummary(Shape):
    """
    One executor of a Spark session.

    Start and termination times are epoch milliseconds as the service
    returns them, not timestamps.
    """

    executor_id = String("ExecutorId")
    executor_type = EnumField("ExecutorType", ExecutorType)
    start_date_time = Integer("StartDateTime")
    termination_date_time = Integer("TerminationDateTime")
    executor_state = EnumField("ExecutorState", ExecutorState)
    executor_size = Integer("ExecutorSize")


class PreparedStatementSummary(Shape):
    statement_name = String("StatementName")
    last_modified_time = Timestamp("LastModifiedTime")


class AthenaRequest(ServiceRequest):
    PROTOCOL = JsonProtocol("AmazonAthena", json_version="1.1")


class CreateNotebookRequest(AthenaRequest):
    OPERATION_NAME = "CreateNotebook"

    work_group = String("WorkGroup", required=True)
    name = String("Name", required=True)
    client_request_token = String("ClientRequestToken")


class CreateNotebookResult(ServiceResult):
    notebook_id = String("NotebookId")


class DeleteNotebookRequest(AthenaRequest):
    OPERATION_NAME = "DeleteNotebook"

    notebook_id = String("NotebookId", required=True)


class GetNotebookMetadataRequest(AthenaRequest):
    OPERATION_NAME = "GetNotebookMetadata"

    notebook_id = String("NotebookId", required=True)


class GetNotebookMetadataResult(ServiceResult):
    notebook_metadata = Structure("NotebookMetadata", NotebookMetadata)


class ListApplicationDPUSizesRequest(AthenaRequest):
    OPERATION_NAME = "ListApplicationDPUSizes"

    max_results = Integer("MaxResults")
    next_token = String("NextToken")


class ListApplicationDPUSizesResult(ServiceResult):
    application_dpu_sizes = List("ApplicationDPUSizes", Structure(shape_cls=ApplicationDPUSizes))
    next_token = String("NextToken")


class ListExecutorsRequest(AthenaRequest):
    OPERATION_NAME = "ListExecutors"

    session_id = String("SessionId", required=True)
    executor_state_filter = EnumField("ExecutorStateFilter", ExecutorState)
    next_token = String("NextToken")
    max_results = Integer("MaxResults")


class ListExecutorsResult(ServiceResult):
    session_id = String("SessionId")
    next_token = String("NextToken")
    executors_summary = List("ExecutorsSummary", Structure(shape_cls=ExecutorsSummary))


class ListPreparedStatementsRequest(AthenaRequest):
    OPERATION_NAME = "ListPreparedStatements"

    work_group = String("WorkGroup", required=True)
    next_token = String("NextToken")
    max_results = Integer("MaxResults")


class ListPreparedStatementsResult(ServiceResult):
    prepared_statements = List("PreparedStatements", Structure(shape_cls=PreparedStatementSummary))
    next_token = String("NextToken")


class InternalServerException(ServiceError):
    pass


class InvalidRequestException(ServiceError):
    """Raised for malformed input; response_data may carry an AthenaErrorCode."""


class ResourceNotFoundException(ServiceError):
    pass


class TooManyRequestsException(ServiceError):
    pass


class AthenaClient(ServiceClient):
    METADATA = METADATA
    ERRORS = {
        error.__name__: error
        for error in (
            InternalServerException,
            InvalidRequestException,
            ResourceNotFoundException,
            TooManyRequestsException,
        )
    }

    @service_operation
    def create_notebook(self, request: CreateNotebookRequest) -> CreateNotebookResult:
        return self.make_request(request, CreateNotebookResult)

    @service_operation
    def delete_notebook(self, request: DeleteNotebookRequest) -> EmptyResult:
        return self.make_request(request, EmptyResult)

    @service_operation
    def get_notebook_metadata(self, request: GetNotebookMetadataRequest) -> GetNotebookMetadataResult:
        return self.make_request(request, GetNotebookMetadataResult)

    @service_operation
    def list_application_dpu_sizes(self, request: ListApplicationDPUSizesRequest) -> ListApplicationDPUSizesResult:
        return self.make_request(request, ListApplicationDPUSizesResult)

    @service_operation
    def list_executors(self, request: ListExecutorsRequest) -> ListExecutorsResult:
        return self.make_request(request, ListExecutorsResult)

    @service_operation
    def list_prepared_statements(self, request: ListPreparedStatementsRequest) -> ListPreparedStatementsResult:
        return self.make_request(request, ListPreparedStatementsResult)
