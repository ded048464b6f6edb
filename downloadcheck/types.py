from dataclasses import dataclass
from typing import BinaryIO, Protocol, Union


@dataclass(frozen=True)
class Downloaded:
    status: int
    size_bytes: int
    elapsed_ms: float = 0.0


@dataclass(frozen=True)
class BadStatus:
    status: int
    size_bytes: int
    elapsed_ms: float = 0.0

    @property
    def message(self) -> str:
        return f"Got {self.status} http response code, expected 2xx"


DownloadResult = Union[Downloaded, BadStatus]


class HttpConnectionProtocol(Protocol):
    def connect(self) -> None: ...

    def input_stream(self) -> BinaryIO: ...

    def response_code(self) -> int: ...

    def disconnect(self) -> None: ...


class HttpClientProtocol(Protocol):
    def open_connection(self, url: str) -> HttpConnectionProtocol: ...
