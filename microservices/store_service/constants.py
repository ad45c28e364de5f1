"""
Store constants

``StoreType`` and ``StoreStatus`` are the only allowed values for store type
and status fields. Tuples and labels below are derived from them.
"""

from enum import Enum
from typing import Dict, Tuple


class StoreType(str, Enum):
    EXPORT = "EXPORT"
    GROUPING = "GROUPING"
    GROUPING_AND_MACHINING = "GROUPING_AND_MACHINING"


class StoreStatus(str, Enum):
    ACTIVE = "active"
    INACTIVE = "inactive"


STORE_TYPES: Tuple[str, ...] = tuple(t.value for t in StoreType)
STORE_STATUSES: Tuple[str, ...] = tuple(s.value for s in StoreStatus)

STORE_TYPE_LABELS: Dict[StoreType, str] = {
    StoreType.EXPORT: "Magasin d'exportation",
    StoreType.GROUPING: "Magasin de groupage",
    StoreType.GROUPING_AND_MACHINING: "Magasin de groupage et d'usinage",
}

STORE_STATUS_LABELS: Dict[StoreStatus, str] = {
    StoreStatus.ACTIVE: "Actif",
    StoreStatus.INACTIVE: "Inactif",
}


def store_type_label(value: str) -> str:
    """Display label for a store type value; unknown values are returned as is"""
    try:
        return STORE_TYPE_LABELS[StoreType(value)]
    except ValueError:
        return value
