"""
Platform Error Taxonomy

Shared exceptions raised by services and rendered by the HTTP layer.

    PlatformError
    ├── ValidationError          (422)
    │   ├── ShapeError           input does not match the declared structure
    │   └── ReferenceNotFoundError  a referenced identifier does not exist
    └── ConfigurationError       (500)
"""

from typing import Any, Dict, List, Optional


class PlatformError(Exception):
    """Base exception for all platform errors"""

    code = "PLATFORM_ERROR"
    status = 500

    def __init__(self, message: str, code: Optional[str] = None, status: Optional[int] = None):
        super().__init__(message)
        self.message = message
        if code:
            self.code = code
        if status:
            self.status = status

    def to_dict(self) -> Dict[str, Any]:
        return {"success": False, "code": self.code, "message": self.message}


class ValidationError(PlatformError):
    """Raised when an input fails validation; carries field-level errors"""

    code = "VALIDATION_ERROR"
    status = 422

    def __init__(self, message: str, errors: Optional[List[Any]] = None, code: Optional[str] = None):
        super().__init__(message, code=code)
        self.errors = list(errors or [])

    def to_dict(self) -> Dict[str, Any]:
        data = super().to_dict()
        data["errors"] = [
            {"field": e.field, "message": e.message, "value": e.value} for e in self.errors
        ]
        return data


class ShapeError(ValidationError):
    """Input or payload does not match the declared structure"""

    code = "VALIDATION_INVALID_FORMAT"


class ReferenceNotFoundError(ValidationError):
    """A referenced identifier has no matching record in the backing store"""

    code = "VALIDATION_REFERENCE_NOT_FOUND"

    @property
    def missing_values(self) -> List[Any]:
        return [e.value for e in self.errors]


class ConfigurationError(PlatformError):
    """Configuration cannot be used as resolved"""

    code = "CONFIGURATION_ERROR"


__all__ = [
    "PlatformError",
    "ValidationError",
    "ShapeError",
    "ReferenceNotFoundError",
    "ConfigurationError",
]
