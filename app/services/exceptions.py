# app/services/exceptions.py

class ServiceError(Exception):
    """Base class for service layer errors."""

    def __init__(self, detail: str):
        self.detail = detail
        super().__init__(detail)


class DomainValidationError(ServiceError):
    """Required input missing or malformed."""
    pass


class ResourceNotFoundError(ServiceError):
    """Resource not found."""
    pass


class ConfigurationError(ServiceError):
    """The WooCommerce connection is not configured."""
    pass


class UpstreamError(ServiceError):
    """WooCommerce or WordPress answered with an error, or could not be reached."""

    def __init__(self, detail: str, status_code: int | None = None, body: str | None = None):
        super().__init__(detail)
        self.status_code = status_code
        self.body = body
