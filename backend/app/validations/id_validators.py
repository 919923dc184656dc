"""
id_validators.py
- Purpose: Identifier checks shared by repos and routers.
- Design: Nil/absent ids are an InvalidArgument, not a NotFound.
"""

from uuid import UUID

from app.core import ErrorReason
from app.core.errors import invalid_argument

NIL_UUID = UUID(int=0)


def require_id(value: UUID | None, name: str) -> UUID:
    if value is None or value == NIL_UUID:
        raise invalid_argument(ErrorReason.INVALID_ID, message=f"{name} is required")
    return value


def parse_id_list(raw: str | None) -> list[UUID]:
    """
    Parse a comma-separated id list, e.g. "id1, id2,id3".
    Empty entries are dropped; a blank list or a malformed id is an InvalidArgument.
    """
    if raw is None or not raw.strip():
        raise invalid_argument(ErrorReason.INVALID_ID, message="ids are required")

    ids: list[UUID] = []
    for part in raw.split(","):
        part = part.strip()
        if not part:
            continue
        try:
            ids.append(UUID(part))
        except ValueError:
            raise invalid_argument(
                ErrorReason.INVALID_ID,
                message=f"'{part}' is not a valid id",
                details={"value": part},
            ) from None

    if not ids:
        raise invalid_argument(ErrorReason.INVALID_ID, message="ids are required")
    return ids
