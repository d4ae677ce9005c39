"""HTTP Controllers."""

from apps.accounts.presentation.http.controllers.root_router import router as root_router

__all__ = ["root_router"]
