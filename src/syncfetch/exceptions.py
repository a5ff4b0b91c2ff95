__all__ = ["FetchException"]


from .code import Code


class FetchException(ValueError):
    """An error raised while building URLs, envelopes or exchanges.

    Every failure the package reports carries a `Code` so callers can tell
    a malformed URL apart from, for example, a transport fault without
    parsing the message.
    """

    def __init__(self, code: Code, message: str) -> None:
        """
        Creates a new syncfetch exception.

        Args:
            code: The error code.
            message: The error message.
        """
        super().__init__(message)
        self._code = code
        self._message = message

    @property
    def code(self) -> Code:
        return self._code

    @property
    def message(self) -> str:
        return self._message
