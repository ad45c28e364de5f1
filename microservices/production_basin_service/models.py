"""
Production Basin Service - Data Models

Request, validation result and response models.
"""

from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field, StrictInt
from pydantic.alias_generators import to_camel

from core.errors import ReferenceNotFoundError, ShapeError

# Rule reported for identifiers with no matching user record
EXISTS_RULE = "exists"


class AssignUsersRequest(BaseModel):
    """Validated ``{"userIds": [...]}`` body"""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, frozen=True)

    user_ids: List[StrictInt]

    def to_wire(self) -> Dict[str, Any]:
        return self.model_dump(by_alias=True)


class FieldError(BaseModel):
    """One failed rule on one field (``userIds`` or ``userIds.<index>``)"""

    model_config = ConfigDict(frozen=True)

    field: str
    message: str
    rule: str
    value: Any = None


class ValidationResult(BaseModel):
    """Either a validated value or the list of field errors"""

    value: Optional[AssignUsersRequest] = None
    errors: List[FieldError] = Field(default_factory=list)

    @property
    def ok(self) -> bool:
        return not self.errors

    @property
    def is_shape_failure(self) -> bool:
        return any(e.rule != EXISTS_RULE for e in self.errors)

    def raise_for_errors(self) -> AssignUsersRequest:
        """Return the value, or raise ShapeError / ReferenceNotFoundError"""
        if self.is_shape_failure:
            raise ShapeError("Données de validation invalides", errors=self.errors)
        if self.errors:
            raise ReferenceNotFoundError("Un ou plusieurs utilisateurs introuvables", errors=self.errors)
        return self.value


class BasinUser(BaseModel):
    """Basin member as returned by the API (camelCase when dumped by alias)"""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    id: int
    username: Optional[str] = None
    email: Optional[str] = None
    given_name: Optional[str] = None
    family_name: Optional[str] = None
    role: Optional[str] = None


class ProductionBasin(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    id: str
    name: str
    users: List[BasinUser] = Field(default_factory=list)


class AssignmentResponse(BaseModel):
    """Body returned by assign/unassign"""
    success: bool = True
    code: str
    message: str
    data: Dict[str, Any]


class HealthResponse(BaseModel):
    status: str
    service: str
    port: int
    version: str
    dependencies: Dict[str, str] = Field(default_factory=dict)
