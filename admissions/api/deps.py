"""API Dependencies"""

from typing import Optional
from uuid import UUID

from fastapi import Header, HTTPException, status

from admissions.database import get_db


async def get_current_actor(
    x_actor_id: Optional[str] = Header(None, alias="X-Actor-ID"),
) -> UUID:
    """
    Identify the actor performing the request.

    The gateway in front of this service authenticates callers and forwards
    the actor's id; this dependency only checks that it is present and well formed.

    Raises:
        HTTPException: If the header is missing or not a UUID
    """
    if not x_actor_id:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Missing X-Actor-ID header",
        )
    try:
        return UUID(x_actor_id)
    except ValueError:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Invalid actor ID",
        )
