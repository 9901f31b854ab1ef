from typing import Any, Optional


class CustomBaseError(Exception):
    """Base class for all custom exceptions - controls logging behavior in @Logger.io"""

    def __init__(
        self,
        message: str,
        status_code: int = 500,
        *,
        description: Optional[str] = None,
        details: Any = None,
    ) -> None:
        self.message = message
        self.status_code = status_code
        self.description = description
        self.details = details
        super().__init__(message)


class DomainError(CustomBaseError):
    def __init__(self, message: str, status_code: int = 400, **kwargs: Any) -> None:
        super().__init__(message, status_code, **kwargs)


class ValidationError(DomainError):
    def __init__(self, message: str, **kwargs: Any) -> None:
        super().__init__(message, 400, **kwargs)


class NotFoundError(CustomBaseError):
    def __init__(self, message: str, **kwargs: Any) -> None:
        super().__init__(message, 404, **kwargs)


class NotConfiguredError(CustomBaseError):
    def __init__(self, message: str, **kwargs: Any) -> None:
        super().__init__(message, 400, **kwargs)


class GatewayError(CustomBaseError):
    """Remote commerce call failed; status code depends on the call site"""

    def __init__(self, message: str, status_code: int = 500, **kwargs: Any) -> None:
        super().__init__(message, status_code, **kwargs)


class StoreError(CustomBaseError):
    def __init__(self, message: str = 'Internal server error', **kwargs: Any) -> None:
        super().__init__(message, 500, **kwargs)
