"""Request identity.

Authentication happens upstream; the gateway forwards the authenticated
user's ID in the X-User-Id header.
"""

from fastapi import Header, HTTPException, status

from discuss.application.usecase.common import parse_uuid


def require_user_id(x_user_id: str | None = Header(default=None)) -> str:
    """Return the caller's user ID or reject the request.

    Args:
        x_user_id: Value of the X-User-Id header

    Returns:
        The user ID as a UUID string

    Raises:
        HTTPException: 401 if the header is missing or not a UUID
    """
    user_id = parse_uuid(x_user_id) if x_user_id else None
    if user_id is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Authentication required",
        )
    return str(user_id)
