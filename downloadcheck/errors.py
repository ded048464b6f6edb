from .types import BadStatus


class HttpStatusError(Exception):
    """Raised when the server answers with a status code above 299."""

    def __init__(self, status: int, message: str) -> None:
        super().__init__(message)
        self.status = status
        self.message = message

    @classmethod
    def from_result(cls, result: BadStatus) -> "HttpStatusError":
        return cls(result.status, result.message)
