from dataclasses import dataclass

from fastapi import HTTPException, Request, status

from app.core.config import settings


@dataclass(frozen=True)
class RequestContext:
    """Identity of the caller for the duration of one request"""

    username: str


def get_request_context(request: Request) -> RequestContext:
    """
    Build the request context from the identity header set by the auth gateway.

    The header value is trusted as-is; token validation happens upstream.
    """
    username = request.headers.get(settings.AUTH_USER_HEADER, "").strip()
    if not username:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Authentication required",
        )
    return RequestContext(username=username)
