class ErrorCode:
    """Error codes reported by document engines."""

    NOT_FOUND = 7
    CONFLICT = 8
    INVALID_PARAMETER = 9
    NOT_OPEN = 11


class DatabaseError(Exception):
    """Failure reported by a document engine, surfaced to callers unchanged."""

    def __init__(self, message: str, domain: str = "doclite", code: int = 0) -> None:
        super().__init__(message)
        self.message = message
        self.domain = domain
        self.code = code

    def __repr__(self) -> str:
        return f"DatabaseError(message={self.message!r}, domain={self.domain!r}, code={self.code})"
