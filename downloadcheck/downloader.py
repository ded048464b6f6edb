import logging
import time

from .config import DownloadConfig
from .errors import HttpStatusError
from .net import HttpClient
from .types import BadStatus, Downloaded, DownloadResult, HttpClientProtocol


logger = logging.getLogger(__name__)


class Downloader:
    def __init__(self, config: DownloadConfig, http_client: HttpClientProtocol | None = None):
        self.config = config
        self.http = http_client or HttpClient(config.user_agent, config.request_timeout, config.max_redirects)

    def fetch(self) -> DownloadResult:
        """Download the configured URL and count its body bytes.

        Network errors from the client propagate unchanged. The connection is
        released exactly once, whichever way the block exits.
        """
        t0 = time.perf_counter()
        conn = self.http.open_connection(self.config.url)
        try:
            conn.connect()
            stream = conn.input_stream()
            size = 0
            while stream.read(1):
                size += 1
            stream.close()
            status = conn.response_code()
        finally:
            conn.disconnect()
        dt_ms = (time.perf_counter() - t0) * 1000.0

        if status > 299:
            result: DownloadResult = BadStatus(status=status, size_bytes=size, elapsed_ms=dt_ms)
            logger.warning("%s answered %d after %d bytes", self.config.url, status, size)
        else:
            result = Downloaded(status=status, size_bytes=size, elapsed_ms=dt_ms)
            logger.info("Fetched %s: status=%d, bytes=%d, fetch_ms=%.1f", self.config.url, status, size, dt_ms)
        return result

    def run(self) -> Downloaded:
        result = self.fetch()
        if isinstance(result, BadStatus):
            raise HttpStatusError.from_result(result)
        print(f"Successfully downloaded url, size={result.size_bytes} bytes")
        return result
