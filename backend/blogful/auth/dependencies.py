from fastapi import Depends, Request

from ..database import SessionDep
from ..users.models import User
from . import service as auth_service


async def require_basic_auth(request: Request, db: SessionDep) -> User:
    """
    매 요청마다 Basic 인증 헤더를 검증하고 인증된 사용자를 반환합니다.
    세션/토큰은 발급하지 않습니다.
    """
    user = await auth_service.authenticate_basic(db, request)
    request.state.user = user
    return user

CurrentUser = Depends(require_basic_auth)
