"""
Base class for controllers that need the current request context.

A controller is built from an ActionContext (see deps.get_action_context).
Every accessor returns None when the context, or any link on the way to the
requested object, is missing.
"""
from dataclasses import dataclass
from typing import Optional

from fastapi import Request, Response
from starlette.datastructures import State


@dataclass
class HttpContext:
    """Per-request HTTP objects."""
    request: Request
    response: Optional[Response] = None
    request_services: Optional[State] = None


@dataclass
class ActionContext:
    """Context of the route currently being executed."""
    http_context: Optional[HttpContext] = None
    route_name: Optional[str] = None

    @classmethod
    def from_request(cls, request: Request, response: Optional[Response] = None) -> "ActionContext":
        route = request.scope.get("route")
        app = request.scope.get("app")
        return cls(
            http_context=HttpContext(
                request=request,
                response=response,
                request_services=app.state if app is not None else None,
            ),
            route_name=getattr(route, "name", None),
        )


class ApiController:
    """Exposes http_context, request, response and resolver for the current action."""

    def __init__(self, action_context: Optional[ActionContext] = None):
        self.action_context = action_context

    @property
    def http_context(self) -> Optional[HttpContext]:
        if self.action_context is None:
            return None
        return self.action_context.http_context

    @property
    def request(self) -> Optional[Request]:
        http_context = self.http_context
        return http_context.request if http_context is not None else None

    @property
    def response(self) -> Optional[Response]:
        http_context = self.http_context
        return http_context.response if http_context is not None else None

    @property
    def resolver(self) -> Optional[State]:
        """Application-wide services (app.state) of the current request."""
        http_context = self.http_context
        return http_context.request_services if http_context is not None else None
