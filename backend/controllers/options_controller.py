"""
Controller behind the /options routes.
"""
import logging
from enum import Enum
from typing import Mapping, Optional, Type

from fastapi.responses import HTMLResponse

from config import Settings, settings as default_settings
from controllers.api_controller import ApiController
from domain.enums import OPTION_ENUMS
from domain.responses import success_response
from services import options_service
from utils.html_helpers import enum_dropdown

logger = logging.getLogger(__name__)


class OptionsController(ApiController):
    """Serves registered enums as option lists (JSON) and <select> markup (HTML)."""

    @property
    def settings(self) -> Settings:
        return getattr(self.resolver, "settings", None) or default_settings

    @property
    def registry(self) -> Mapping[str, Type[Enum]]:
        return getattr(self.resolver, "option_enums", None) or OPTION_ENUMS

    def _cache_control(self) -> str:
        return f"public, max-age={self.settings.options_cache_seconds}"

    def _path(self) -> str:
        return self.request.url.path if self.request is not None else "<no request>"

    def list_enums(self) -> dict:
        return success_response(options_service.list_option_enums(self.registry))

    def options(self, enum_key: str, selected: Optional[str] = None) -> dict:
        logger.info(f"Options requested on {self._path()}")
        data = options_service.get_options(self.registry, enum_key, selected)
        if self.response is not None:
            self.response.headers["Cache-Control"] = self._cache_control()
        return success_response(data, meta={"enum": enum_key, "count": len(data)})

    def select(
        self,
        enum_key: str,
        selected: Optional[str] = None,
        name: Optional[str] = None,
    ) -> HTMLResponse:
        logger.info(f"Select markup requested on {self._path()}")
        enum_type = options_service.get_enum_type(self.registry, enum_key)
        markup = enum_dropdown(
            name or enum_key,
            enum_type,
            selected,
            css_class=self.settings.select_css_class or None,
            placeholder=self.settings.select_placeholder,
        )
        return HTMLResponse(markup, headers={"Cache-Control": self._cache_control()})
