class JoblyError(Exception):
    """Base class for errors the data-access layer raises to its callers."""

    status_code: int = 500

    def __init__(self, detail: str) -> None:
        super().__init__(detail)
        self.detail = detail


class InvalidRequestError(JoblyError):
    """Input is structurally insufficient or contradictory; raised before any query runs."""

    status_code = 400


class NotFoundError(JoblyError):
    """A referenced row does not exist."""

    status_code = 404
