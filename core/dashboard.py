from __future__ import annotations

from types import MappingProxyType
from typing import Iterable, Mapping

from .menu import MenuItem, UserMenu
from .permissions import AUTHENTICATED, IMPERSONATING


class Dashboard:
    """Configuração base do dashboard administrativo.

    Subclasses definem a rota do dashboard, o domínio de tradução padrão dos
    rótulos, os CRUD controllers conhecidos (``{"app_label.Model": "id"}``) e
    os itens de menu. O projeto escolhe a subclasse em ``ADMIN_DASHBOARD``.
    """

    title = "Painel"
    route_name = "core:dashboard"
    translation_domain: str | None = None
    crud_controllers: Mapping[str, str] = MappingProxyType({})
    use_gravatar = True

    def configure_menu_items(self, request) -> Iterable[MenuItem]:
        yield MenuItem.link_to_dashboard("Painel", "fa fa-home")

    def configure_user_menu(self, request, user) -> UserMenu:
        user_menu = UserMenu(
            name=str(user),
            items=[
                MenuItem.link_to_exit_impersonation(
                    "Encerrar personificação",
                    "fa fa-user-lock",
                    permissions=[IMPERSONATING],
                ),
                MenuItem.link_to_logout("Sair", "fa fa-sign-out", permissions=[AUTHENTICATED]),
            ],
        )
        email = getattr(user, "email", "")
        if self.use_gravatar and email:
            user_menu.set_gravatar_email(email)
        return user_menu
