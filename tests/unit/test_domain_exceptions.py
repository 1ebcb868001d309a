"""Tests for domain exceptions (error_code, message, details)."""

from codelists.domain.exceptions import (
    CodeAlreadyExistsException,
    CodelistException,
    HasChildrenException,
    HierarchyCycleException,
    ParentNotFoundException,
    ParentRequiredException,
    ResourceNotFoundException,
    SqlNotConfiguredException,
    StructuralViolationException,
    ValidationException,
)


def test_codelist_exception_default_error_code() -> None:
    """Base CodelistException uses class name as error_code when not provided."""
    exc = CodelistException("Something failed")
    assert exc.message == "Something failed"
    assert exc.error_code == "CodelistException"
    assert exc.details == {}


def test_to_dict_shape() -> None:
    exc = CodelistException("Oops", error_code="CUSTOM", details={"key": "value"})
    assert exc.to_dict() == {
        "error": "CUSTOM",
        "message": "Oops",
        "details": {"key": "value"},
    }


def test_validation_exception() -> None:
    """ValidationException sets VALIDATION_ERROR and optional field in details."""
    exc = ValidationException("Invalid level", field="level")
    assert exc.error_code == "VALIDATION_ERROR"
    assert exc.details == {"field": "level"}
    assert ValidationException("Invalid").details == {}


def test_resource_not_found() -> None:
    exc = ResourceNotFoundException("VoltageLevel", 7)
    assert exc.error_code == "RESOURCE_NOT_FOUND"
    assert exc.message == "VoltageLevel not found: 7"
    assert exc.details == {"resource_type": "VoltageLevel", "resource_id": 7}


def test_parent_not_found_is_a_not_found() -> None:
    exc = ParentNotFoundException(42)
    assert isinstance(exc, ResourceNotFoundException)
    assert exc.error_code == "RESOURCE_NOT_FOUND"
    assert exc.parent_id == 42


def test_code_already_exists() -> None:
    exc = CodeAlreadyExistsException("BuildingClassification", "801")
    assert exc.error_code == "CODE_ALREADY_EXISTS"
    assert "801" in exc.message
    assert exc.details["code"] == "801"


def test_has_children_is_structural_violation() -> None:
    exc = HasChildrenException(5)
    assert isinstance(exc, StructuralViolationException)
    assert exc.error_code == "HAS_CHILDREN"
    assert exc.message == "Cannot delete classification with children. Delete children first."
    assert exc.node_id == 5


def test_parent_required_and_cycle_use_structural_code() -> None:
    required = ParentRequiredException(3)
    cycle = HierarchyCycleException(1, 4)
    assert required.error_code == "STRUCTURAL_VIOLATION"
    assert required.details == {"level": 3, "field": "parent_id"}
    assert cycle.error_code == "STRUCTURAL_VIOLATION"
    assert cycle.details == {"node_id": 1, "parent_id": 4}


def test_sql_not_configured() -> None:
    exc = SqlNotConfiguredException()
    assert exc.error_code == "SERVICE_UNAVAILABLE"
