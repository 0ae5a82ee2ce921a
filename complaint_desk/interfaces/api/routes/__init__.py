from fastapi import FastAPI

from .auth import router as auth_router
from .categories import router as categories_router
from .chats import router as chats_router
from .departments import router as departments_router
from .mailer import router as mailer_router
from .notifications import router as notifications_router
from .organizations import router as organizations_router
from .tickets import router as tickets_router
from .users import router as users_router


def register_routes(app: FastAPI) -> None:
    """Register every API router on the FastAPI application."""

    app.include_router(auth_router)
    app.include_router(organizations_router)
    app.include_router(departments_router)
    app.include_router(categories_router)
    app.include_router(users_router)
    app.include_router(tickets_router)
    app.include_router(notifications_router)
    app.include_router(mailer_router)
    app.include_router(chats_router)
