"""
Shared FastAPI dependencies.

Routers build their controllers from here so every controller sees the
same ActionContext for the request being served.
"""

from __future__ import annotations

from typing import Callable, Type, TypeVar

from fastapi import Depends, Request, Response

from controllers.api_controller import ActionContext, ApiController

C = TypeVar("C", bound=ApiController)


def get_action_context(request: Request, response: Response) -> ActionContext:
    """ActionContext for the current request (request, response, app services)."""
    return ActionContext.from_request(request, response)


def controller_dependency(controller_cls: Type[C]) -> Callable[..., C]:
    """
    Build a dependency that instantiates controller_cls for each request.

    Usage:
        controller: OptionsController = Depends(controller_dependency(OptionsController))
    """
    def dependency(action_context: ActionContext = Depends(get_action_context)) -> C:
        return controller_cls(action_context)

    dependency.__name__ = f"get_{controller_cls.__name__}"
    return dependency
