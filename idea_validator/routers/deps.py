"""Request dependencies: the authenticated user resolved from proxy headers."""
from typing import Optional

from fastapi import Depends, Header, HTTPException, status

from idea_validator.models import CurrentUser


async def get_current_user(
    x_user_id: Optional[str] = Header(None),
    x_user_email: Optional[str] = Header(None),
    x_user_name: Optional[str] = Header(None),
    x_user_photo: Optional[str] = Header(None),
) -> Optional[CurrentUser]:
    """Signed-in user forwarded by the identity proxy, or None when anonymous."""
    if not x_user_id or not x_user_id.strip():
        return None
    return CurrentUser(
        id=x_user_id.strip(),
        email=x_user_email,
        display_name=x_user_name,
        photo_url=x_user_photo,
    )


async def require_user(
    user: Optional[CurrentUser] = Depends(get_current_user),
) -> CurrentUser:
    if user is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Sign in to view your ideas",
        )
    return user
