"""
SigV4 request signing backed by botocore.
"""
from typing import Optional

import boto3
from botocore.auth import SigV4Auth
from botocore.awsrequest import AWSRequest
from botocore.credentials import Credentials
from botocore.exceptions import NoCredentialsError

from logger_config import get_logger
from protocols.base import HttpRequest

logger = get_logger(__name__)


class RequestSigner:
    """Signs rendered requests for one service signing name and region."""

    def __init__(
        self,
        signing_name: str,
        region: str,
        credentials: Optional[Credentials] = None,
        profile_name: Optional[str] = None,
    ):
        self.signing_name = signing_name
        self.region = region
        self.profile_name = profile_name
        self._credentials = credentials

    @property
    def credentials(self) -> Credentials:
        """Lazy lookup through the boto3 credential chain."""
        if self._credentials is None:
            session = boto3.session.Session(profile_name=self.profile_name)
            credentials = session.get_credentials()
            if credentials is None:
                raise NoCredentialsError()
            self._credentials = credentials
        return self._credentials

    def sign(self, request: HttpRequest) -> HttpRequest:
        """Add the SigV4 Authorization, X-Amz-Date and token headers in place."""
        aws_request = AWSRequest(
            method=request.method,
            url=request.url,
            headers=dict(request.headers),
            data=request.body,
        )
        SigV4Auth(self.credentials, self.signing_name, self.region).add_auth(aws_request)
        request.headers = dict(aws_request.headers.items())
        logger.debug(f"Signed {request.method} {request.url} for {self.signing_name}/{self.region}")
        return request
