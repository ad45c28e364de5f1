"""
Location constants

``LocationType`` and ``LocationStatus`` are the only allowed values for
location type and status fields. Tuples and labels below are derived from
them; add a member to the enum, never a literal elsewhere.
"""

from enum import Enum
from typing import Dict, Tuple


class LocationType(str, Enum):
    """Administrative level, outermost first"""
    REGION = "region"
    DEPARTMENT = "department"
    DISTRICT = "district"

    @property
    def level(self) -> int:
        """Depth in the hierarchy (region = 0)"""
        return list(LocationType).index(self)

    def is_ancestor_of(self, other: "LocationType") -> bool:
        """True when a location of this type can contain one of ``other``"""
        return self.level < LocationType(other).level


class LocationStatus(str, Enum):
    ACTIVE = "active"
    INACTIVE = "inactive"


LOCATION_TYPES: Tuple[str, ...] = tuple(t.value for t in LocationType)
LOCATION_STATUSES: Tuple[str, ...] = tuple(s.value for s in LocationStatus)

LOCATION_TYPE_LABELS: Dict[LocationType, str] = {
    LocationType.REGION: "Région",
    LocationType.DEPARTMENT: "Département",
    LocationType.DISTRICT: "District",
}

LOCATION_STATUS_LABELS: Dict[LocationStatus, str] = {
    LocationStatus.ACTIVE: "Active",
    LocationStatus.INACTIVE: "Inactive",
}
