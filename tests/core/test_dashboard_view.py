import pytest
from django.urls import reverse

from accounts.factories import UserFactory
from accounts.models import UserType

DASHBOARD_URL = "/"


def test_dashboard_requires_login(client):
    response = client.get(DASHBOARD_URL)

    assert response.status_code == 302
    assert response.url.startswith(reverse("accounts:login"))


def test_admin_menu_contains_crud_links(client):
    user = UserFactory(user_type=UserType.ADMIN)
    client.force_login(user)

    response = client.get(DASHBOARD_URL)
    content = response.content.decode()

    assert response.status_code == 200
    assert "Usuários" in content
    assert "crudController=usuarios" in content
    assert reverse("accounts:logout") in content
    # Sem a permissão accounts.view_user
    assert reverse("admin:index") not in content


@pytest.mark.parametrize("user_type", [UserType.FINANCEIRO, UserType.CONVIDADO])
def test_menu_hides_staff_items_for_other_roles(client, user_type):
    client.force_login(UserFactory(user_type=user_type))

    response = client.get(DASHBOARD_URL)
    content = response.content.decode()

    assert "crudController=usuarios" not in content
    assert "Cadastros" not in content
    assert "Ferramentas" in content


def test_selected_item_is_highlighted(client, admin_user):
    client.force_login(admin_user)

    response = client.get(DASHBOARD_URL, {"menuIndex": "0", "submenuIndex": "-1"})

    main_menu = response.context["MAIN_MENU"]
    assert main_menu.is_selected(main_menu.items[0])
    assert 'aria-current="page"' in response.content.decode()


def test_crud_link_opens_dashboard_with_controller(client, admin_user):
    client.force_login(admin_user)

    response = client.get(
        DASHBOARD_URL,
        {"crudController": "usuarios", "crudAction": "index", "menuIndex": "2", "submenuIndex": "-1"},
    )

    assert response.context["crud_entity"] == "accounts.User"
    assert "CRUD usuarios: index" in response.content.decode()


def test_user_menu_is_rendered(client):
    user = UserFactory(first_name="Ana", last_name="Souza")
    client.force_login(user)

    response = client.get(DASHBOARD_URL)
    content = response.content.decode()

    assert 'id="user-menu"' in content
    assert "Ana Souza" in content
    assert "https://www.gravatar.com/avatar/" in content
    assert "_switch_user=_exit" not in content


def test_login_page_shows_anonymous_menu(client):
    response = client.get(reverse("accounts:login"))
    content = response.content.decode()

    assert response.status_code == 200
    assert 'id="user-menu"' not in content
    assert "Entrar" in content
    assert reverse("accounts:logout") not in content


def test_submenu_parent_is_a_toggle_not_a_link(client, admin_user):
    client.force_login(admin_user)

    content = client.get(DASHBOARD_URL).content.decode()

    assert 'href="" ' not in content
    assert 'href="#" target="_self" class="submenu-toggle flex' in content
