"""Exceptions raised by scholar-scraper."""


class ScholarError(Exception):
    """Base exception for all scholar-scraper errors."""


class ConnectionFailedError(ScholarError):
    """The request never produced a response (DNS, refused, timeout)."""

    def __init__(self, url: str) -> None:
        super().__init__(f"Could not connect to {url}")
        self.url = url


class ParseError(ScholarError):
    """Response body or HTML document could not be decoded."""


class InvalidServiceError(ScholarError):
    """Unknown search service target."""


class MissingRequiredFieldError(ScholarError):
    """A required query parameter is empty."""


class NotImplementedFeatureError(ScholarError):
    """Requested feature is reserved but not available yet."""


class MalformedURLError(ScholarError):
    """The assembled search URL failed to parse."""


class InvalidResponseError(ScholarError):
    """The service answered with an HTTP error status."""

    def __init__(self, status_code: int, url: str) -> None:
        super().__init__(f"HTTP {status_code} from {url}")
        self.status_code = status_code
        self.url = url
