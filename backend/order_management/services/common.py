"""
Helpers shared by the CRUD services
"""
from typing import Optional

# Swagger UI pre-fills string fields with this literal
PLACEHOLDER_VALUE = "string"


def value_for_update(value: Optional[str]) -> Optional[str]:
    """
    Normalize a partial-update string field

    Blank strings and the Swagger placeholder count as "not provided".
    """
    if value is None or not value.strip() or value.strip().lower() == PLACEHOLDER_VALUE:
        return None
    return value
