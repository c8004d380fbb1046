"""Contexto administrativo de cada requisição.

O contexto reúne o dashboard configurado, as preferências de idioma e o
registro de CRUD controllers usados para montar os menus.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Mapping

from django.conf import settings
from django.contrib.auth.models import AnonymousUser
from django.core.exceptions import ImproperlyConfigured
from django.utils import translation
from django.utils.module_loading import import_string

if TYPE_CHECKING:  # pragma: no cover
    from .dashboard import Dashboard


def entity_label(entity) -> str | None:
    """Normaliza uma entidade (model ou ``"app_label.Model"``) para o label do model."""
    if entity is None or isinstance(entity, str):
        return entity
    meta = getattr(entity, "_meta", None)
    if meta is None:
        raise TypeError(f"Entidade inválida para o menu: {entity!r}")
    return meta.label


class CrudControllerRegistry:
    """Mapeia entidades para os identificadores dos seus CRUD controllers."""

    def __init__(self, controllers: Mapping | None = None) -> None:
        self._controller_by_entity: dict[str, str] = {}
        self._entity_by_controller: dict[str, str] = {}
        for entity, controller in (controllers or {}).items():
            label = entity_label(entity)
            self._controller_by_entity[label] = controller
            self._entity_by_controller[controller] = label

    def controller_for_entity(self, entity) -> str | None:
        return self._controller_by_entity.get(entity_label(entity))

    def entity_for_controller(self, controller: str | None) -> str | None:
        if controller is None:
            return None
        return self._entity_by_controller.get(controller)

    def __len__(self) -> int:
        return len(self._controller_by_entity)


@dataclass
class I18n:
    locale: str
    text_direction: str
    translation_domain: str | None = None


@dataclass
class AdminContext:
    request: object
    dashboard: "Dashboard"
    i18n: I18n
    crud_controllers: CrudControllerRegistry
    selected_index: int = -1
    selected_sub_index: int = -1

    @property
    def user(self):
        return getattr(self.request, "user", None) or AnonymousUser()

    @property
    def dashboard_route_name(self) -> str:
        return self.dashboard.route_name

    @classmethod
    def from_request(cls, request, dashboard: "Dashboard | None" = None) -> "AdminContext":
        dashboard = dashboard or get_dashboard_class()()
        i18n = I18n(
            locale=translation.get_language() or settings.LANGUAGE_CODE,
            text_direction="rtl" if translation.get_language_bidi() else "ltr",
            translation_domain=dashboard.translation_domain,
        )
        query = getattr(request, "GET", {})
        return cls(
            request=request,
            dashboard=dashboard,
            i18n=i18n,
            crud_controllers=CrudControllerRegistry(dashboard.crud_controllers),
            selected_index=_get_int(query, "menuIndex"),
            selected_sub_index=_get_int(query, "submenuIndex"),
        )


def _get_int(query, key: str, default: int = -1) -> int:
    try:
        return int(query.get(key, default))
    except (TypeError, ValueError):
        return default


def get_dashboard_class():
    path = getattr(settings, "ADMIN_DASHBOARD", "core.dashboard.Dashboard")
    try:
        return import_string(path)
    except ImportError as exc:
        raise ImproperlyConfigured(f"ADMIN_DASHBOARD '{path}' não pôde ser importado.") from exc


def get_admin_context(request) -> AdminContext:
    """Retorna o contexto anexado pelo middleware, criando-o quando ausente."""
    context = getattr(request, "admin_context", None)
    if context is None:
        context = AdminContext.from_request(request)
        request.admin_context = context
    return context
