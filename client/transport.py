"""
HTTP transport backed by a pooled requests session.
"""
from typing import Optional

import requests
from requests.adapters import HTTPAdapter

from config import ClientConfig
from logger_config import get_logger
from protocols.base import HttpRequest, HttpResponse
from utils.exceptions import NetworkError

logger = get_logger(__name__)


class HttpTransport:
    """Sends rendered requests and returns raw responses."""

    def __init__(self, config: ClientConfig):
        self.config = config
        self._session: Optional[requests.Session] = None

    @property
    def session(self) -> requests.Session:
        """Lazy initialization of the pooled session."""
        if self._session is None:
            session = requests.Session()
            adapter = HTTPAdapter(
                pool_connections=self.config.max_connections,
                pool_maxsize=self.config.max_connections,
            )
            session.mount("https://", adapter)
            session.mount("http://", adapter)
            self._session = session
        return self._session

    def send(self, request: HttpRequest) -> HttpResponse:
        """
        Send one request.

        Raises:
            NetworkError: If the connection fails or times out
        """
        try:
            response = self.session.request(
                request.method,
                request.url,
                headers=request.headers,
                data=request.body or None,
                timeout=(self.config.connect_timeout, self.config.request_timeout),
                verify=self.config.verify_ssl,
            )
        except requests.RequestException as e:
            logger.error(f"HTTP {request.method} {request.url} failed: {str(e)}")
            raise NetworkError(f"Failed to send request: {str(e)}", url=request.url) from e

        logger.debug(f"HTTP {request.method} {request.url} returned {response.status_code}")
        return HttpResponse(
            status_code=response.status_code,
            headers=dict(response.headers),
            body=response.content,
        )

    def close(self) -> None:
        if self._session is not None:
            self._session.close()
            self._session = None
