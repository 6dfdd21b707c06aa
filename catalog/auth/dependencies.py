import binascii
import logging
from base64 import b64decode

from fastapi import Depends, HTTPException, Request, status
from fastapi.security import HTTPBasic, HTTPBasicCredentials
from fastapi.security.utils import get_authorization_scheme_param

from catalog.auth.passwords import verify_password
from catalog.repository import CatalogRepository

logger = logging.getLogger(__name__)

ACCESS_DENIED = "Access Denied"


class OptionalHTTPBasic(HTTPBasic):
    """HTTP basic credentials, or None when the header is absent or malformed.

    The payload is decoded as UTF-8 (RFC 7617), so non-ASCII passwords work.
    """

    async def __call__(self, request: Request) -> HTTPBasicCredentials | None:
        scheme, param = get_authorization_scheme_param(request.headers.get("Authorization"))
        if scheme.lower() != "basic" or not param:
            return None
        try:
            data = b64decode(param, validate=True).decode("utf-8")
        except (ValueError, UnicodeDecodeError, binascii.Error):
            return None
        username, separator, password = data.partition(":")
        if not separator:
            return None
        return HTTPBasicCredentials(username=username, password=password)


security = OptionalHTTPBasic(auto_error=False)


def get_repository(request: Request) -> CatalogRepository:
    return request.app.state.repository


def get_current_user(
    request: Request,
    credentials: HTTPBasicCredentials | None = Depends(security),
    repository: CatalogRepository = Depends(get_repository),
) -> dict:
    if credentials is None:
        logger.warning("Auth header not found")
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail=ACCESS_DENIED)

    user = next(
        (candidate for candidate in repository.list_users() if candidate["emailAddress"] == credentials.username),
        None,
    )
    if user is None:
        logger.warning("User not found for username: %s", credentials.username)
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail=ACCESS_DENIED)

    if not verify_password(credentials.password, user["password"]):
        logger.warning("Authentication failure for username: %s", credentials.username)
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail=ACCESS_DENIED)

    logger.info("Authentication successful for username: %s", credentials.username)
    request.state.current_user = user
    return user
