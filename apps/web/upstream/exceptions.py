"""Upstream integration exceptions."""


class UpstreamError(Exception):
    """Fetching from the third-party restaurant source failed."""

    def __init__(
        self,
        message: str,
        status_code: int | None = None,
        response_body: str | None = None,
    ) -> None:
        self.message = message
        self.status_code = status_code
        self.response_body = response_body
        super().__init__(message)
