"""Domain exceptions for the Lifehacking application.

Defines domain-level exceptions for business rule violations and the
infrastructure failures that callers must be able to tell apart from them.
Presentation layer maps them to HTTP responses in exception handlers.
"""

from typing import Any


class LifehackingException(Exception):
    """Base exception for all Lifehacking application errors.

    All custom exceptions inherit from this class to allow consistent error
    handling and logging. Presentation layer maps these to HTTP responses
    using message, error_code, and details.

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

    def to_dict(self) -> dict[str, Any]:
        """Return the JSON body used by the HTTP exception handler."""
        return {
            "error": self.error_code,
            "message": self.message,
            "details": self.details,
        }


class ValidationException(LifehackingException):
    """Raised when input validation fails (e.g. invalid format or range)."""

    def __init__(self, message: str, field: str | None = None) -> None:
        """Initialize with message and optional field name.

        Args:
            message: Description of the validation failure.
            field: Optional field or attribute that failed validation.
        """
        details = {"field": field} if field else {}
        super().__init__(message, "VALIDATION_ERROR", details)


class ResourceNotFoundException(LifehackingException):
    """Raised when a requested resource is missing or soft-deleted."""

    def __init__(self, resource_type: str, resource_id: str) -> None:
        """Initialize with resource type and id.

        Args:
            resource_type: Type of resource (e.g. 'category', 'tip').
            resource_id: The ID that was not found.
        """
        super().__init__(
            f"{resource_type} not found: {resource_id}",
            "RESOURCE_NOT_FOUND",
            {"resource_type": resource_type, "resource_id": resource_id},
        )


class ConflictException(LifehackingException):
    """Raised when a create/update would duplicate a unique value (name, email)."""

    def __init__(self, message: str, field: str | None = None) -> None:
        details = {"field": field} if field else {}
        super().__init__(message, "CONFLICT", details)


class InfrastructureException(LifehackingException):
    """Raised when persistence or the cache store fails.

    Distinct from domain errors: the request itself was valid, the
    infrastructure could not serve it.
    """

    def __init__(
        self,
        message: str,
        error_code: str = "INFRASTRUCTURE_ERROR",
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(message, error_code, details)


class PersistenceException(InfrastructureException):
    """Raised when a repository operation fails (store unreachable, timeout, bad response)."""

    def __init__(self, operation: str, reason: str | None = None) -> None:
        """Initialize with the failed operation.

        Args:
            operation: Repository operation (e.g. 'categories.update').
            reason: Optional short reason from the underlying client.
        """
        details: dict[str, Any] = {"operation": operation}
        if reason:
            details["reason"] = reason
        super().__init__(
            f"Persistence operation failed: {operation}",
            "PERSISTENCE_ERROR",
            details,
        )


class CacheStoreException(InfrastructureException):
    """Raised when the cache store cannot perform an operation (e.g. delete)."""

    def __init__(self, operation: str, key: str, reason: str | None = None) -> None:
        """Initialize with operation and key.

        Args:
            operation: Cache operation that failed (e.g. 'delete').
            key: Cache key involved.
            reason: Optional short reason from the underlying client.
        """
        details: dict[str, Any] = {"operation": operation, "key": key}
        if reason:
            details["reason"] = reason
        super().__init__(
            f"Cache {operation} failed for key {key!r}",
            "CACHE_STORE_ERROR",
            details,
        )


class CacheInvalidationException(InfrastructureException):
    """Raised when a mutation was persisted but its cache eviction failed.

    The entity change is durable; one or more cached read views may still
    serve the previous state until they expire. Never reported as success.
    """

    def __init__(self, entity: str, mutation: str, keys: list[str]) -> None:
        """Initialize with the mutation that could not be invalidated.

        Args:
            entity: Entity kind that was mutated (e.g. 'tip').
            mutation: Mutation kind (e.g. 'updated').
            keys: Cache keys the mutation required to be evicted.
        """
        super().__init__(
            f"{entity} {mutation} was saved but cache invalidation failed",
            "CACHE_INVALIDATION_FAILED",
            {
                "entity": entity,
                "mutation": mutation,
                "keys": keys,
                "mutation_persisted": True,
            },
        )
