from error_trace.frozen import ErrorTrace


class TraceError(ErrorTrace, Exception):
    """Ad hoc error carrying a message and an optional wrapped cause.

    The cause may be any traceable value, including a frozen trace.
    """

    def __init__(self, message: str, cause: object | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.cause = cause
        if isinstance(cause, BaseException):
            self.__cause__ = cause

    def __str__(self) -> str:
        return self.message

    def source(self) -> object | None:
        if self.cause is not None:
            return self.cause
        if self.__cause__ is not None:
            return self.__cause__
        if not self.__suppress_context__:
            return self.__context__
        return None
