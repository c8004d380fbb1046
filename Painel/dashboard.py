from django.contrib.auth import get_user_model

from accounts.models import UserType
from core.dashboard import Dashboard
from core.menu import MenuItem
from core.permissions import ANONYMOUS, AUTHENTICATED

STAFF = [UserType.ROOT.value, UserType.ADMIN.value]


class PainelDashboard(Dashboard):
    title = "Painel Administrativo"
    crud_controllers = {
        "accounts.User": "usuarios",
    }

    def configure_menu_items(self, request):
        User = get_user_model()

        yield MenuItem.link_to_dashboard("Painel", "fa fa-home", permissions=[AUTHENTICATED])

        yield MenuItem.section("Cadastros", permissions=STAFF)
        yield MenuItem.link_to_crud("Usuários", "fa fa-users", User, permissions=STAFF)
        yield MenuItem.submenu(
            "Ferramentas",
            "fa fa-wrench",
            permissions=[AUTHENTICATED],
            children=[
                MenuItem.link_to_crud(
                    "Novo usuário",
                    "fa fa-user-plus",
                    User,
                    action="new",
                    permissions=STAFF,
                ),
                MenuItem.link_to_route(
                    "Administração",
                    "fa fa-cogs",
                    "admin:index",
                    permissions=["accounts.view_user"],
                ),
                MenuItem.link_to_route("Menu em JSON", "fa fa-code", "core_api:menu"),
                MenuItem.link_to_url(
                    "Documentação do Django",
                    "fa fa-book",
                    "https://docs.djangoproject.com/",
                    link_target="_blank",
                    link_rel="noopener",
                ),
            ],
        )

        yield MenuItem.section()
        yield MenuItem.link_to_logout("Sair", "fa fa-sign-out", permissions=[AUTHENTICATED])
        yield MenuItem.link_to_route("Entrar", "fa fa-sign-in", "accounts:login", permissions=[ANONYMOUS])
