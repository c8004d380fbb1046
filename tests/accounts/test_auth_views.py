from django.urls import reverse

from accounts.factories import UserFactory


def test_logout_view_ends_session_and_redirects(client):
    user = UserFactory()
    client.force_login(user)

    response = client.get(reverse("accounts:logout"))

    assert response.status_code == 302
    assert response.url == reverse("accounts:login")
    assert "_auth_user_id" not in client.session


def test_login_view_authenticates_by_email(client):
    UserFactory(username="ana", email="ana@example.com")

    response = client.post(reverse("accounts:login"), {"username": "ana@example.com", "password": "pass"})

    assert response.status_code == 302
    assert response.url == reverse("core:dashboard")
