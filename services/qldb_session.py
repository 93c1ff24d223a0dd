"""
Amazon QLDB Session (JSON 1.0 protocol).

Every interaction with a ledger goes through the single SendCommand
operation; the request carries exactly one command structure and the
result carries the matching command result.
"""
from client.base import ServiceClient, ServiceMetadata
from model import (
    Blob,
    Integer,
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
    service_name="QLDB Session",
    endpoint_prefix="session.qldb",
    signing_name="qldb",
    api_version="2019-07-11",
)


class ValueHolder(Shape):
    """An Amazon Ion value, as binary or as text."""

    ion_binary = Blob("IonBinary")
    ion_text = String("IonText")


class TimingInformation(Shape):
    processing_time_milliseconds = Integer("ProcessingTimeMilliseconds")


class IOUsage(Shape):
    read_ios = Integer("ReadIOs")
    write_ios = Integer("WriteIOs")


class Page(Shape):
    values = List("Values", Structure(shape_cls=ValueHolder))
    next_page_token = String("NextPageToken")


class StartSessionRequest(Shape):
    ledger_name = String("LedgerName")


class StartTransactionRequest(Shape):
    pass


class EndSessionRequest(Shape):
    pass


class AbortTransactionRequest(Shape):
    pass


class CommitTransactionRequest(Shape):
    transaction_id = String("TransactionId")
    commit_digest = Blob("CommitDigest")


class ExecuteStatementRequest(Shape):
    transaction_id = String("TransactionId")
    statement = String("Statement")
    parameters = List("Parameters", Structure(shape_cls=ValueHolder))


class FetchPageRequest(Shape):
    transaction_id = String("TransactionId")
    next_page_token = String("NextPageToken")


class StartSessionResult(Shape):
    session_token = String("SessionToken")
    timing_information = Structure("TimingInformation", TimingInformation)


class StartTransactionResult(Shape):
    transaction_id = String("TransactionId")
    timing_information = Structure("TimingInformation", TimingInformation)


class EndSessionResult(Shape):
    timing_information = Structure("TimingInformation", TimingInformation)


class AbortTransactionResult(Shape):
    timing_information = Structure("TimingInformation", TimingInformation)


class CommitTransactionResult(Shape):
    transaction_id = String("TransactionId")
    commit_digest = Blob("CommitDigest")
    timing_information = Structure("TimingInformation", TimingInformation)
    consumed_ios = Structure("ConsumedIOs", IOUsage)


class ExecuteStatementResult(Shape):
    first_page = Structure("FirstPage", Page)
    timing_information = Structure("TimingInformation", TimingInformation)
    consumed_ios = Structure("ConsumedIOs", IOUsage)


class FetchPageResult(Shape):
    page = Structure("Page", Page)
    timing_information = Structure("TimingInformation", TimingInformation)
    consumed_ios = Structure("ConsumedIOs", IOUsage)


class QLDBSessionRequest(ServiceRequest):
    PROTOCOL = JsonProtocol("QLDBSession", json_version="1.0")


class SendCommandRequest(QLDBSessionRequest):
    OPERATION_NAME = "SendCommand"

    session_token = String("SessionToken")
    start_session = Structure("StartSession", StartSessionRequest)
    start_transaction = Structure("StartTransaction", StartTransactionRequest)
    end_session = Structure("EndSession", EndSessionRequest)
    commit_transaction = Structure("CommitTransaction", CommitTransactionRequest)
    abort_transaction = Structure("AbortTransaction", AbortTransactionRequest)
    execute_statement = Structure("ExecuteStatement", ExecuteStatementRequest)
    fetch_page = Structure("FetchPage", FetchPageRequest)


class SendCommandResult(ServiceResult):
    start_session = Structure("StartSession", StartSessionResult)
    start_transaction = Structure("StartTransaction", StartTransactionResult)
    end_session = Structure("EndSession", EndSessionResult)
    commit_transaction = Structure("CommitTransaction", CommitTransactionResult)
    abort_transaction = Structure("AbortTransaction", AbortTransactionResult)
    execute_statement = Structure("ExecuteStatement", ExecuteStatementResult)
    fetch_page = Structure("FetchPage", FetchPageResult)


class BadRequestException(ServiceError):
    pass


class CapacityExceededException(ServiceError):
    pass


class InvalidSessionException(ServiceError):
    """The session token expired or the session was ended."""


class LimitExceededException(ServiceError):
    pass


class OccConflictException(ServiceError):
    """The transaction lost an optimistic concurrency check and must be retried."""


class RateExceededException(ServiceError):
    pass


class QLDBSessionClient(ServiceClient):
    METADATA = METADATA
    ERRORS = {
        error.__name__: error
        for error in (
            BadRequestException,
            CapacityExceededException,
            InvalidSessionException,
            LimitExceededException,
            OccConflictException,
            RateExceededException,
        )
    }

    @service_operation
    def send_command(self, request: SendCommandRequest) -> SendCommandResult:
        return self.make_request(request, SendCommandResult)
