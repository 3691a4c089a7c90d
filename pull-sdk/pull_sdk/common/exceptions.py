from typing import Optional


class BasePullException(Exception):
    message: str

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message

    def serialize(self) -> str:
        return self.message

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, BasePullException):
            return NotImplemented
        return type(self) is type(other) and self.message == other.message

    def __hash__(self) -> int:
        return hash((type(self), self.message))

    def __repr__(self) -> str:
        return self.message


class ConstructionError(BasePullException): ...


class TransportError(BasePullException): ...


class RemoteError(BasePullException):
    """
    The oracle service answered with a non-success HTTP status.
    """

    status: int
    body: Optional[str]

    def __init__(self, status: int, message: str, body: Optional[str] = None):
        super().__init__(message)
        self.status = status
        self.body = body

    def serialize(self) -> str:
        return f"{self.status}: {self.message}"


class DecodeError(BasePullException): ...


class ConfigError(BasePullException): ...


class ChainConnectionError(BasePullException): ...


class SubmissionError(BasePullException): ...
