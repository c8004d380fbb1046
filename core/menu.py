from __future__ import annotations

import hashlib
import logging
from dataclasses import dataclass, field
from typing import Any, Callable, Iterable, List
from urllib.parse import urlencode

from django.conf import settings
from django.db import models
from django.shortcuts import resolve_url
from django.urls import NoReverseMatch, reverse
from django.utils.translation import gettext, pgettext

from .context import AdminContext, entity_label, get_admin_context
from .metrics import MENU_BUILD_LATENCY, MENU_ITEMS_HIDDEN
from .permissions import get_permission_checker

logger = logging.getLogger(__name__)

# Query string keys carried by CRUD and route links
MENU_INDEX_PARAM = "menuIndex"
SUBMENU_INDEX_PARAM = "submenuIndex"
SEARCH_QUERY_PARAM = "query"

DEFAULT_CRUD_ACTION = "index"


class MenuItemType(models.TextChoices):
    CRUD = "crud", "CRUD"
    DASHBOARD = "dashboard", "Dashboard"
    EXIT_IMPERSONATION = "exit_impersonation", "Exit impersonation"
    LOGOUT = "logout", "Logout"
    ROUTE = "route", "Route"
    SECTION = "section", "Section"
    SUBMENU = "submenu", "Submenu"
    URL = "url", "URL"


@dataclass
class MenuItem:
    """Definição declarativa de um item de menu.

    Use os construtores ``link_to_*``, ``section`` e ``submenu`` em vez de
    instanciar diretamente. ``route_parameters`` guarda os parâmetros de query
    string do item; para rotas, ``route_kwargs`` são os argumentos do path.
    """

    type: str
    label: str | None
    icon: str | None = None
    permissions: List[str] | None = None
    css_class: str = ""
    link_target: str = "_self"
    link_rel: str = ""
    translation_domain: str | None = None
    route_name: str | None = None
    route_kwargs: dict[str, Any] | None = None
    route_parameters: dict[str, Any] = field(default_factory=dict)
    link_url: str | None = None
    children: List["MenuItem"] | None = None

    def __post_init__(self) -> None:
        self.type = MenuItemType(self.type)

    @classmethod
    def link_to_crud(
        cls,
        label: str,
        icon: str | None,
        entity,
        *,
        action: str = DEFAULT_CRUD_ACTION,
        entity_id=None,
        controller: str | None = None,
        **options,
    ) -> "MenuItem":
        return cls(
            MenuItemType.CRUD,
            label,
            icon,
            route_parameters={
                "crudAction": action,
                "crudController": controller,
                "entityFqcn": entity_label(entity),
                "entityId": entity_id,
            },
            **options,
        )

    @classmethod
    def link_to_dashboard(cls, label: str, icon: str | None = None, **options) -> "MenuItem":
        return cls(MenuItemType.DASHBOARD, label, icon, **options)

    @classmethod
    def link_to_route(
        cls,
        label: str,
        icon: str | None,
        route_name: str,
        *,
        route_kwargs: dict[str, Any] | None = None,
        query: dict[str, Any] | None = None,
        **options,
    ) -> "MenuItem":
        return cls(
            MenuItemType.ROUTE,
            label,
            icon,
            route_name=route_name,
            route_kwargs=route_kwargs,
            route_parameters=dict(query or {}),
            **options,
        )

    @classmethod
    def link_to_url(cls, label: str, icon: str | None, url: str, **options) -> "MenuItem":
        return cls(MenuItemType.URL, label, icon, link_url=url, **options)

    @classmethod
    def link_to_logout(cls, label: str, icon: str | None = None, **options) -> "MenuItem":
        return cls(MenuItemType.LOGOUT, label, icon, **options)

    @classmethod
    def link_to_exit_impersonation(cls, label: str, icon: str | None = None, **options) -> "MenuItem":
        return cls(MenuItemType.EXIT_IMPERSONATION, label, icon, **options)

    @classmethod
    def section(
        cls,
        label: str | None = None,
        icon: str | None = None,
        *,
        permissions: List[str] | None = None,
        css_class: str = "",
        translation_domain: str | None = None,
    ) -> "MenuItem":
        # Seções não são links: sem target/rel
        return cls(
            MenuItemType.SECTION,
            label,
            icon,
            permissions=permissions,
            css_class=css_class,
            translation_domain=translation_domain,
        )

    @classmethod
    def submenu(
        cls,
        label: str,
        icon: str | None = None,
        children: Iterable["MenuItem"] = (),
        **options,
    ) -> "MenuItem":
        return cls(MenuItemType.SUBMENU, label, icon, children=list(children), **options)


@dataclass
class MenuItemDto:
    type: str
    label: str
    link_url: str
    index: int
    sub_index: int
    icon: str | None = None
    css_class: str = ""
    link_target: str = "_self"
    link_rel: str = ""
    permissions: List[str] | None = None
    sub_items: List["MenuItemDto"] = field(default_factory=list)

    @property
    def is_menu_section(self) -> bool:
        return self.type == MenuItemType.SECTION

    @property
    def has_sub_items(self) -> bool:
        return bool(self.sub_items)


@dataclass
class MainMenuDto:
    items: List[MenuItemDto]
    selected_index: int = -1
    selected_sub_index: int = -1

    def is_selected(self, item: MenuItemDto) -> bool:
        return item.index == self.selected_index and item.sub_index == self.selected_sub_index

    def is_expanded(self, item: MenuItemDto) -> bool:
        return item.index == self.selected_index and self.selected_sub_index != -1


@dataclass
class UserMenu:
    """Configuração do menu do usuário (nome, avatar e itens)."""

    name: str | None = None
    display_name: bool = True
    avatar_url: str | None = None
    display_avatar: bool = True
    items: List[MenuItem] = field(default_factory=list)

    def set_gravatar_email(self, email: str) -> "UserMenu":
        digest = hashlib.md5(email.strip().lower().encode("utf-8")).hexdigest()
        self.avatar_url = f"https://www.gravatar.com/avatar/{digest}?s=28&d=mp"
        return self


@dataclass
class UserMenuDto:
    name: str | None
    display_name: bool
    avatar_url: str | None
    display_avatar: bool
    items: List[MenuItemDto] = field(default_factory=list)


def translate_label(message, domain: str | None = None) -> str:
    """Traduz o rótulo usando o domínio como contexto de tradução (``pgettext``)."""
    if not message:
        return ""
    message = str(message)
    if domain:
        return pgettext(domain, message)
    return gettext(message)


def get_logout_url() -> str:
    return resolve_url(getattr(settings, "MENU_LOGOUT_URL", "accounts:logout"))


def get_exit_impersonation_url() -> str:
    parameter = getattr(settings, "MENU_SWITCH_USER_PARAMETER", "_switch_user")
    return f"?{urlencode({parameter: '_exit'})}"


def _append_query(url: str, parameters: dict[str, Any], *, sort: bool = False) -> str:
    pairs = [(key, value) for key, value in parameters.items() if value is not None]
    if sort:
        pairs.sort(key=lambda pair: pair[0])
    if not pairs:
        return url
    return f"{url}?{urlencode(pairs, doseq=True)}"


def build_crud_url(dashboard_route_name: str, parameters: dict[str, Any]) -> str:
    """Gera a URL de uma página CRUD servida pela rota do dashboard.

    Parâmetros nulos são descartados e as chaves são ordenadas para que a
    mesma página sempre produza a mesma URL.
    """

    parameters = dict(parameters)
    if parameters.get("crudController") is not None and parameters.get("crudAction") is None:
        parameters["crudAction"] = DEFAULT_CRUD_ACTION
    return _append_query(reverse(dashboard_route_name), parameters, sort=True)


class MenuFactory:
    """Transforma definições de menu em registros prontos para exibição."""

    def __init__(
        self,
        admin_context: AdminContext,
        check_permission: Callable[[Any, MenuItem], bool] | None = None,
        translate: Callable[[Any, str | None], str] | None = None,
        logout_url: Callable[[], str] | None = None,
    ) -> None:
        self.admin_context = admin_context
        self.check_permission = check_permission or get_permission_checker()
        self.translate = translate or translate_label
        self.logout_url = logout_url or get_logout_url
        self._url_builders = {
            MenuItemType.CRUD: self._crud_url,
            MenuItemType.DASHBOARD: self._dashboard_url,
            MenuItemType.ROUTE: self._route_url,
            MenuItemType.SECTION: lambda item, index, sub_index: "#",
            MenuItemType.LOGOUT: lambda item, index, sub_index: self.logout_url(),
            MenuItemType.EXIT_IMPERSONATION: lambda item, index, sub_index: get_exit_impersonation_url(),
            MenuItemType.URL: lambda item, index, sub_index: item.link_url or "",
        }

    def create_main_menu(
        self,
        menu_items: Iterable[MenuItem],
        selected_index: int = -1,
        selected_sub_index: int = -1,
    ) -> MainMenuDto:
        with MENU_BUILD_LATENCY.labels("main").time():
            items = self._build_menu_items(menu_items, menu="main")
        return MainMenuDto(items, selected_index, selected_sub_index)

    def create_user_menu(self, user_menu: UserMenu) -> UserMenuDto:
        with MENU_BUILD_LATENCY.labels("user").time():
            items = self._build_menu_items(user_menu.items, menu="user")
        return UserMenuDto(
            name=user_menu.name,
            display_name=user_menu.display_name,
            avatar_url=user_menu.avatar_url,
            display_avatar=user_menu.display_avatar,
            items=items,
        )

    def _is_granted(self, item: MenuItem, menu: str) -> bool:
        if self.check_permission(self.admin_context.user, item):
            return True
        MENU_ITEMS_HIDDEN.labels(menu).inc()
        logger.debug(
            "menu_item_hidden",
            extra={"menu": menu, "label": str(item.label), "permissions": item.permissions},
        )
        return False

    def _build_menu_items(self, menu_items: Iterable[MenuItem], menu: str) -> List[MenuItemDto]:
        # Os índices são as posições na lista configurada, antes do filtro
        default_domain = self.admin_context.i18n.translation_domain
        built: List[MenuItemDto] = []
        for index, item in enumerate(menu_items):
            if not self._is_granted(item, menu):
                continue

            sub_items: List[MenuItemDto] = []
            for sub_index, sub_item in enumerate(item.children or []):
                if not self._is_granted(sub_item, menu):
                    continue
                sub_items.append(self._build_menu_item(sub_item, [], index, sub_index, default_domain))

            built.append(self._build_menu_item(item, sub_items, index, -1, default_domain))
        return built

    def _build_menu_item(
        self,
        item: MenuItem,
        sub_items: List[MenuItemDto],
        index: int,
        sub_index: int,
        default_domain: str | None,
    ) -> MenuItemDto:
        label = self.translate(item.label, item.translation_domain or default_domain)
        return MenuItemDto(
            type=item.type,
            label=label,
            link_url=self.generate_url(item, index, sub_index),
            index=index,
            sub_index=sub_index,
            icon=item.icon,
            css_class=item.css_class,
            link_target=item.link_target,
            link_rel=item.link_rel,
            permissions=item.permissions,
            sub_items=sub_items,
        )

    def generate_url(self, item: MenuItem, index: int, sub_index: int) -> str:
        builder = self._url_builders.get(item.type)
        if builder is None:
            return ""
        return builder(item, index, sub_index)

    def _default_parameters(self, index: int, sub_index: int) -> dict[str, Any]:
        # "query" é removido para que o clique no menu não repita uma busca
        return {MENU_INDEX_PARAM: index, SUBMENU_INDEX_PARAM: sub_index, SEARCH_QUERY_PARAM: None}

    def _crud_url(self, item: MenuItem, index: int, sub_index: int) -> str:
        parameters = self._default_parameters(index, sub_index)
        parameters.update(item.route_parameters)

        entity = parameters.get("entityFqcn")
        if parameters.get("crudController") is None and entity is not None:
            controller = self.admin_context.crud_controllers.controller_for_entity(entity)
            if controller is None:
                logger.warning("menu_crud_controller_missing", extra={"entity": entity})
            else:
                parameters["crudController"] = controller

        if parameters.get("crudController") is not None:
            parameters.pop("entityFqcn", None)

        return build_crud_url(self.admin_context.dashboard_route_name, parameters)

    def _dashboard_url(self, item: MenuItem, index: int, sub_index: int) -> str:
        return reverse(self.admin_context.dashboard_route_name)

    def _route_url(self, item: MenuItem, index: int, sub_index: int) -> str:
        parameters = self._default_parameters(index, sub_index)
        parameters.update(item.route_parameters)
        try:
            url = reverse(item.route_name, kwargs=item.route_kwargs or None)
        except NoReverseMatch:
            logger.exception("menu_route_unresolved", extra={"route_name": item.route_name})
            raise
        return _append_query(url, parameters)


def build_main_menu(request) -> MainMenuDto:
    """Retorna o menu principal do dashboard filtrado para o usuário da requisição."""

    context = get_admin_context(request)
    items = list(context.dashboard.configure_menu_items(request))
    factory = MenuFactory(context)
    return factory.create_main_menu(items, context.selected_index, context.selected_sub_index)


def build_user_menu(request) -> UserMenuDto | None:
    context = get_admin_context(request)
    user = context.user
    if not user.is_authenticated:
        return None
    user_menu = context.dashboard.configure_user_menu(request, user)
    return MenuFactory(context).create_user_menu(user_menu)
