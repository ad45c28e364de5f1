"""
Production Basin Service - Input validation

``validate_assign_users`` checks the body of assign/unassign requests in two
stages. Shape rules run first and, if any fails, the user store is never
queried. Existence is then checked for all identifiers in one batched
lookup.
"""

import logging
from typing import Any, List, Mapping

from .models import EXISTS_RULE, AssignUsersRequest, FieldError, ValidationResult
from .protocols import UserLookupProtocol

logger = logging.getLogger(__name__)

USER_IDS = "userIds"


def _is_strict_int(value: Any) -> bool:
    # bool is an int subclass but not an identifier
    return isinstance(value, int) and not isinstance(value, bool)


def check_assign_users_shape(candidate: Any) -> List[FieldError]:
    """Shape rules only; no I/O"""
    if not isinstance(candidate, Mapping):
        return [FieldError(
            field="body",
            message="Le corps de la requête doit être un objet",
            rule="object",
            value=candidate,
        )]

    if USER_IDS not in candidate or candidate[USER_IDS] is None:
        return [FieldError(
            field=USER_IDS,
            message="Le champ userIds est requis",
            rule="required",
        )]

    user_ids = candidate[USER_IDS]
    if not isinstance(user_ids, list):
        return [FieldError(
            field=USER_IDS,
            message="Le champ userIds doit être un tableau",
            rule="array",
            value=user_ids,
        )]

    return [
        FieldError(
            field=f"{USER_IDS}.{index}",
            message=f"L'élément {USER_IDS}.{index} doit être un entier",
            rule="integer",
            value=value,
        )
        for index, value in enumerate(user_ids)
        if not _is_strict_int(value)
    ]


async def validate_assign_users(candidate: Any, lookup: UserLookupProtocol) -> ValidationResult:
    """
    Validate ``{"userIds": [int, ...]}``.

    Args:
        candidate: Decoded request body
        lookup: User existence lookup, called at most once

    Returns:
        ValidationResult with either ``value`` or ``errors`` set
    """
    errors = check_assign_users_shape(candidate)
    if errors:
        logger.debug(f"Assign users body rejected on shape: {[e.field for e in errors]}")
        return ValidationResult(errors=errors)

    user_ids: List[int] = list(candidate[USER_IDS])
    if user_ids:
        existing = await lookup.find_existing_ids(sorted(set(user_ids)))
        errors = [
            FieldError(
                field=f"{USER_IDS}.{index}",
                message=f"L'utilisateur {user_id} n'existe pas",
                rule=EXISTS_RULE,
                value=user_id,
            )
            for index, user_id in enumerate(user_ids)
            if user_id not in existing
        ]
        if errors:
            logger.debug(f"Assign users body references unknown users: {[e.value for e in errors]}")
            return ValidationResult(errors=errors)

    return ValidationResult(value=AssignUsersRequest(user_ids=user_ids))


async def validate_assign_users_or_raise(candidate: Any, lookup: UserLookupProtocol) -> AssignUsersRequest:
    """Validate and return the request, raising ShapeError or ReferenceNotFoundError"""
    result = await validate_assign_users(candidate, lookup)
    return result.raise_for_errors()
