"""Domain exceptions for the codelists service.

Defines domain-level exceptions that represent business rule violations.
These exceptions are independent of infrastructure concerns. Presentation
layer maps them to HTTP responses in exception handlers.

Taxonomy:
    NotFound            -> ResourceNotFoundException (ParentNotFoundException)
    Conflict            -> CodeAlreadyExistsException
    StructuralViolation -> StructuralViolationException and subclasses
                           (HasChildrenException, ParentRequiredException,
                           HierarchyCycleException)

Storage failures are not wrapped: SQLAlchemy errors propagate as-is.
"""

from typing import Any


class CodelistException(Exception):
    """Base exception for all codelist service errors.

    All custom exceptions should inherit from this class to allow
    consistent error handling and logging. Presentation layer maps
    these to HTTP responses using message, error_code, and details.

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


class ValidationException(CodelistException):
    """Raised when input validation fails (e.g. invalid format or range)."""

    def __init__(self, message: str, field: str | None = None) -> None:
        """Initialize with message and optional field name.

        Args:
            message: Description of the validation failure.
            field: Optional field or attribute that failed validation.
        """
        details = {"field": field} if field else {}
        super().__init__(message, "VALIDATION_ERROR", details)


class ResourceNotFoundException(CodelistException):
    """Raised when a requested resource is not found."""

    def __init__(self, resource_type: str, resource_id: Any) -> None:
        """Initialize with resource type and id.

        Args:
            resource_type: Type of resource (e.g. 'BuildingClassification').
            resource_id: The id or code that was not found.
        """
        super().__init__(
            f"{resource_type} not found: {resource_id}",
            "RESOURCE_NOT_FOUND",
            {"resource_type": resource_type, "resource_id": resource_id},
        )


class ParentNotFoundException(ResourceNotFoundException):
    """Raised when a classification node references a parent id that does not exist."""

    def __init__(self, parent_id: int) -> None:
        super().__init__("Parent classification", parent_id)
        self.parent_id = parent_id


class CodeAlreadyExistsException(CodelistException):
    """Raised when creating or renaming a record to a code already used in its codelist."""

    def __init__(self, entity_type: str, code: str) -> None:
        """Initialize with the codelist entity type and the duplicate code.

        Args:
            entity_type: Codelist entity type (e.g. 'VoltageLevel').
            code: The code that already exists.
        """
        super().__init__(
            f"{entity_type} with code '{code}' already exists",
            "CODE_ALREADY_EXISTS",
            {"entity_type": entity_type, "code": code},
        )


class StructuralViolationException(CodelistException):
    """Raised when a change would break the classification tree structure."""

    def __init__(
        self,
        message: str,
        error_code: str = "STRUCTURAL_VIOLATION",
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(message, error_code, details)


class HasChildrenException(StructuralViolationException):
    """Raised when deleting a classification node that still has children."""

    def __init__(self, node_id: int) -> None:
        """Initialize with the node that still has children.

        Args:
            node_id: Id of the node whose deletion was refused.
        """
        super().__init__(
            "Cannot delete classification with children. Delete children first.",
            "HAS_CHILDREN",
            {"node_id": node_id},
        )
        self.node_id = node_id


class ParentRequiredException(StructuralViolationException):
    """Raised when a node below level 1 is saved without a parent."""

    def __init__(self, level: int) -> None:
        super().__init__(
            f"Classification at level {level} requires a parent",
            details={"level": level, "field": "parent_id"},
        )


class HierarchyCycleException(StructuralViolationException):
    """Raised when re-parenting would make a node its own ancestor."""

    def __init__(self, node_id: int, parent_id: int) -> None:
        super().__init__(
            f"Classification {node_id} cannot be placed under {parent_id}: "
            "the parent is the node itself or one of its descendants",
            details={"node_id": node_id, "parent_id": parent_id},
        )


class SqlNotConfiguredException(CodelistException):
    """Raised when an operation requires the database but no engine is configured."""

    def __init__(self) -> None:
        super().__init__(
            message="This operation requires a SQL database that is not configured.",
            error_code="SERVICE_UNAVAILABLE",
        )
