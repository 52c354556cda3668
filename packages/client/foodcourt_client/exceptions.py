"""Client exceptions."""


class APIRequestError(Exception):
    """
    Error raised when a Foodcourt API call fails.

    Attributes:
        message: Server-provided message when the body carried one
        status_code: HTTP status code (None for transport failures)
    """

    def __init__(self, message: str, status_code: int | None = None) -> None:
        self.message = message
        self.status_code = status_code
        super().__init__(message)
