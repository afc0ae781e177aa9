import logging
from typing import Optional

from passlib.context import CryptContext
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from ..config import Config, settings
from .models import User as UserModel
from .schema import UserCreate

logger = logging.getLogger(__name__)

pwd_context = CryptContext(
    schemes=["bcrypt"],
    deprecated="auto",
    bcrypt__rounds=settings.BCRYPT_ROUNDS,
)


def configure_password_hashing(config: Config) -> None:
    """create_app()에 주입된 설정의 bcrypt cost를 적용합니다."""
    pwd_context.update(bcrypt__rounds=config.BCRYPT_ROUNDS)


class UserAlreadyExists(Exception):
    def __init__(self, user_name: str):
        self.user_name = user_name
        super().__init__(f"User name already taken: {user_name}")


def hash_password(plain_password: str) -> str:
    return pwd_context.hash(plain_password)

def verify_password(plain_password: str, hashed_password: str) -> bool:
    # passlib의 verify는 상수 시간 비교를 사용합니다.
    return pwd_context.verify(plain_password, hashed_password)

def dummy_verify() -> None:
    """존재하지 않는 사용자에 대해서도 해시 검증 비용을 동일하게 소모합니다."""
    pwd_context.dummy_verify()

async def get_user_by_user_name(user_name: str, db: AsyncSession) -> Optional[UserModel]:
    result = await db.execute(select(UserModel).where(UserModel.user_name == user_name))
    return result.scalar_one_or_none()

async def create_user(user_data: UserCreate, db: AsyncSession) -> UserModel:
    existing_user = await get_user_by_user_name(user_data.user_name, db)
    if existing_user:
        raise UserAlreadyExists(user_data.user_name)

    db_user = UserModel(
        user_name=user_data.user_name,
        full_name=user_data.full_name,
        nickname=user_data.nickname,
        password=hash_password(user_data.password),
    )
    db.add(db_user)
    await db.commit()
    await db.refresh(db_user)
    logger.info(f"Created user id={db_user.id} user_name={db_user.user_name!r}")
    return db_user
