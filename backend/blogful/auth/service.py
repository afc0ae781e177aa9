import logging
from typing import Optional, Tuple

from fastapi import HTTPException, Request
from fastapi.security import HTTPBasic
from sqlalchemy.ext.asyncio import AsyncSession

from ..errors import AuthInvalid, AuthMissing
from ..users import service as user_service
from ..users.models import User

logger = logging.getLogger(__name__)

WWW_AUTHENTICATE = {"WWW-Authenticate": 'Basic realm="blogful"'}

# auto_error=False: 헤더가 없으면 None을 반환하므로 에러 메시지는 직접 결정합니다.
basic_scheme = HTTPBasic(realm="blogful", auto_error=False)


async def read_basic_credentials(request: Request) -> Tuple[str, str]:
    """
    Authorization 헤더에서 (user_name, password)를 추출합니다.

    - 헤더가 없거나 Basic 스킴이 아니면 AuthMissing
    - 디코딩 실패, 혹은 user_name/password 중 하나라도 비어 있으면 AuthInvalid
    """
    try:
        credentials = await basic_scheme(request)
    except HTTPException:
        logger.info("Rejected basic token that could not be decoded")
        raise AuthInvalid(headers=WWW_AUTHENTICATE)

    if credentials is None:
        raise AuthMissing(headers=WWW_AUTHENTICATE)
    if not credentials.username or not credentials.password:
        raise AuthInvalid(headers=WWW_AUTHENTICATE)
    return credentials.username, credentials.password


async def authenticate_user(db: AsyncSession, user_name: str, password: str) -> Optional[User]:
    """
    사용자 이름과 비밀번호로 인증을 시도합니다.
    성공 시 User 객체를, 실패 시 None을 반환합니다.
    """
    user = await user_service.get_user_by_user_name(user_name, db)
    if user is None:
        user_service.dummy_verify()
        return None
    if not user_service.verify_password(password, user.password):
        return None
    return user


async def authenticate_basic(db: AsyncSession, request: Request) -> User:
    user_name, password = await read_basic_credentials(request)
    user = await authenticate_user(db, user_name, password)
    if user is None:
        logger.warning(f"Basic auth failed for user_name={user_name!r}")
        raise AuthInvalid(headers=WWW_AUTHENTICATE)
    return user
