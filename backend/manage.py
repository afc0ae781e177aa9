import asyncio
from typing import Optional

import typer
import uvicorn

import blogful.db_models # noqa: F401

from blogful.config import settings
from blogful.database import build_engine, build_session_factory, create_tables
from blogful.users.schema import UserCreate
from blogful.users.service import UserAlreadyExists, create_user

cli = typer.Typer(help="Blogful API management commands.")


async def init_db_runner() -> None:
    engine = build_engine(settings)
    try:
        await create_tables(engine)
    finally:
        await engine.dispose()


async def create_user_runner(user_data: UserCreate) -> None:
    engine = build_engine(settings)
    session_factory = build_session_factory(engine)
    try:
        async with session_factory() as session:
            user = await create_user(user_data=user_data, db=session)
        print(f"✅ User created: id={user.id}, user_name={user.user_name}")
    finally:
        await engine.dispose()


@cli.command(name="init-db")
def init_db():
    """
    Creates all tables (users, articles, comments) from the ORM metadata.
    """
    asyncio.run(init_db_runner())
    print("✅ Tables created")


@cli.command(name="create-user")
def createuser(
    user_name: str = typer.Option(..., "--user-name", "-u", help="Unique login name."),
    password: str = typer.Option(..., "--password", "-p", help="Password (stored as a bcrypt hash)."),
    full_name: Optional[str] = typer.Option(None, "--full-name", "-f", help="Display name, defaults to the user name."),
    nickname: Optional[str] = typer.Option(None, "--nickname", "-n", help="Optional nickname."),
):
    """
    Creates a user that can authenticate with HTTP Basic auth.
    """
    user_data = UserCreate(
        user_name=user_name,
        password=password,
        full_name=full_name or user_name,
        nickname=nickname,
    )
    try:
        asyncio.run(create_user_runner(user_data))
    except UserAlreadyExists as e:
        print(f"❌ {e}")
        raise typer.Exit(code=1)


@cli.command()
def serve(
    host: str = typer.Option(settings.APP_HOST, "--host", help="Bind address."),
    port: int = typer.Option(settings.APP_PORT, "--port", help="Bind port."),
    reload: bool = typer.Option(False, "--reload", help="Reload on code changes."),
):
    """
    Runs the API with uvicorn.
    """
    uvicorn.run("blogful.main:app", host=host, port=port, reload=reload, log_level=settings.LOG_LEVEL.lower())


if __name__ == "__main__":
    cli()
