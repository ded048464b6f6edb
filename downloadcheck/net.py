import logging
from typing import BinaryIO, Optional

import urllib3
from urllib3.response import BaseHTTPResponse
from urllib3.util.retry import Retry


logger = logging.getLogger(__name__)


class HttpConnection:
    """One GET against one URL, backed by a shared urllib3 pool.

    The body is left unread on the socket after ``connect()`` so callers can
    stream it through ``input_stream()``.
    """

    def __init__(self, http: urllib3.PoolManager, url: str, timeout: urllib3.Timeout) -> None:
        self.http = http
        self.url = url
        self.timeout = timeout
        self._response: Optional[BaseHTTPResponse] = None

    def connect(self) -> None:
        logger.debug("Opening connection to %s", self.url)
        self._response = self.http.request(
            "GET",
            self.url,
            timeout=self.timeout,
            preload_content=False,
        )

    def _require_response(self) -> BaseHTTPResponse:
        if self._response is None:
            raise RuntimeError(f"Connection to {self.url} is not open")
        return self._response

    def input_stream(self) -> BinaryIO:
        return self._require_response()  # type: ignore[return-value]

    def response_code(self) -> int:
        return self._require_response().status

    def disconnect(self) -> None:
        if self._response is None:
            return
        self._response.release_conn()
        self._response = None


class HttpClient:
    def __init__(self, user_agent: str, request_timeout: Optional[float] = None, max_redirects: int = 5):
        self.user_agent = user_agent
        if request_timeout is None:
            self.timeout = urllib3.Timeout()
        else:
            self.timeout = urllib3.Timeout(connect=request_timeout, read=request_timeout)
        self.http = urllib3.PoolManager(
            num_pools=1,
            maxsize=1,
            headers={"User-Agent": user_agent},
            retries=Retry(
                total=None,
                connect=0,
                read=0,
                other=0,
                redirect=max_redirects,
                raise_on_status=False,
            ),
        )

    def open_connection(self, url: str) -> HttpConnection:
        return HttpConnection(self.http, url, self.timeout)
