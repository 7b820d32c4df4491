from __future__ import annotations


class PostcodeError(Exception):
    """Base error for postcode-nl."""

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)


class InvalidInput(PostcodeError):
    """The postcode (or house number) cannot be sent to the API as given."""

    def __init__(self, value: object, message: str | None = None) -> None:
        self.value = value
        super().__init__(
            message
            or f"Postcodes should be formatted as `1234AB` or `1234 AB`, input: {value}"
        )


class NoApiResponse(PostcodeError):
    """Raised when the API could not be reached at all."""


class TooManyRequests(PostcodeError):
    """Raised on HTTP 429. Callers should back off."""

    def __init__(self, message: str = "API limits exceeded") -> None:
        super().__init__(message)


class InvalidApiResponse(PostcodeError):
    """Raised when the headers or body do not have the expected shape."""


class InvalidData(PostcodeError):
    """
    The API reports the input as invalid although it passed local validation.
    Local validation should make this unreachable; InvalidInput is raised instead.
    """


class OtherApiError(PostcodeError):
    """Raised for any status other than 200, 404 and 429."""

    def __init__(self, status_code: int, body: str, reason_phrase: str = "") -> None:
        self.status_code = status_code
        self.reason_phrase = reason_phrase
        self.body = body
        status = f"{status_code} {reason_phrase}" if reason_phrase else str(status_code)
        super().__init__(f"Received error from API, code: {status}, {body}")
