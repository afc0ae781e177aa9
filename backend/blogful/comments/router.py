from typing import Annotated

from fastapi import APIRouter, Path, Request, Response, status

from ..auth.dependencies import CurrentUser
from ..database import DB_INT_MAX, SessionDep
from ..users.models import User
from . import service
from .schemas import CommentCreate, CommentOut

router = APIRouter(prefix="/comments", tags=["comments"])

CommentId = Annotated[int, Path(ge=1, le=DB_INT_MAX)]


@router.post("", response_model=CommentOut, status_code=status.HTTP_201_CREATED)
async def create_comment(
    body: CommentCreate,
    db: SessionDep,
    request: Request,
    response: Response,
    current_user: User = CurrentUser,
):
    comment = await service.create_comment(db, body, author=current_user)
    response.headers["Location"] = f"{request.url.path.rstrip('/')}/{comment.id}"
    return comment


@router.get("/{comment_id}", response_model=CommentOut)
async def get_comment(comment_id: CommentId, db: SessionDep):
    return await service.get_comment_or_404(db, comment_id)
