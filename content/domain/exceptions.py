"""Domain exceptions for the content layer.

Defines domain-level exceptions that represent business rule violations
and resolution failures. Callers at the routing boundary decide which of
them collapse into a not-found response.
"""

from typing import Any


class ContentException(Exception):
    """Base exception for all content layer errors.

    Attributes:
        message: Human-readable error description.
        error_code: Machine-readable error code.
        details: Additional error context (e.g. field, resource_id).
    """

    def __init__(
        self,
        message: str,
        error_code: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """Initialize the exception.

        Args:
            message: Human-readable error description.
            error_code: Optional machine-readable code; defaults to class name.
            details: Optional dict of extra context.
        """
        self.message = message
        self.error_code = error_code or self.__class__.__name__
        self.details = details or {}
        super().__init__(self.message)


class ValidationException(ContentException):
    """Raised when input validation fails (e.g. missing locale on a target key)."""

    def __init__(self, message: str, field: str | None = None) -> None:
        """Initialize with message and optional field name.

        Args:
            message: Description of the validation failure.
            field: Optional field or attribute that failed validation.
        """
        details = {"field": field} if field else {}
        super().__init__(message, "VALIDATION_ERROR", details)


class SqlNotConfiguredException(ContentException):
    """Raised when an operation requires the SQL database but DATABASE_URL is unset."""

    def __init__(self) -> None:
        super().__init__(
            message="This operation requires a SQL database that is not configured.",
            error_code="SERVICE_UNAVAILABLE",
        )


class ContentNotFoundError(ContentException):
    """Raised when no variant satisfies the requested dimension, even after fallback."""

    def __init__(
        self,
        resource_key: str,
        resource_id: str,
        dimension_attributes: dict[str, Any],
    ) -> None:
        """Initialize with the entity reference and requested dimension.

        Args:
            resource_key: Resource key of the entity (e.g. 'pages').
            resource_id: Entity id.
            dimension_attributes: Requested dimension (e.g. {'locale': 'de', 'stage': 'live'}).
        """
        super().__init__(
            f"Could not load content for {resource_key} {resource_id} "
            f"with dimension attributes {dimension_attributes!r}",
            "CONTENT_NOT_FOUND",
            {
                "resource_key": resource_key,
                "resource_id": resource_id,
                "dimension_attributes": dimension_attributes,
            },
        )


class MetadataNotFoundError(ContentException):
    """Raised when no template/view metadata exists for resolved content."""

    def __init__(self, template_type: str, template_key: str | None) -> None:
        """Initialize with the template type and key that were looked up.

        Args:
            template_type: Template type of the content (e.g. 'page').
            template_key: Template key, or None when the content has none.
        """
        super().__init__(
            f"Structure metadata not found for {template_type} template {template_key!r}",
            "METADATA_NOT_FOUND",
            {"template_type": template_type, "template_key": template_key},
        )


class InvalidCacheLifetimeError(ContentException):
    """Raised when a cache lifetime descriptor is malformed or unsupported.

    This is a configuration bug; it is never recovered into a not-found response.
    """

    def __init__(self, cache_lifetime: Any) -> None:
        """Initialize with the offending descriptor.

        Args:
            cache_lifetime: Raw descriptor as found in template metadata.
        """
        super().__init__(
            f"Invalid cache lifetime in route defaults provider: {cache_lifetime!r}",
            "INVALID_CACHE_LIFETIME",
            {"cache_lifetime": cache_lifetime},
        )


class ContentContractViolationError(ContentException):
    """Raised when a loaded or aggregated object lacks an expected capability.

    Signals a programming or configuration error (e.g. a content type whose
    projection cannot select a template), never a user-facing condition.
    """

    def __init__(self, expected: str, given: str) -> None:
        """Initialize with expected capability and the type actually received.

        Args:
            expected: Name of the required capability or base class.
            given: Name of the received type.
        """
        super().__init__(
            f'Expected to get "{expected}" from content aggregator but "{given}" given.',
            "CONTENT_CONTRACT_VIOLATION",
            {"expected": expected, "given": given},
        )
