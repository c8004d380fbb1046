from __future__ import annotations

from django.conf import settings
from django.core.exceptions import ImproperlyConfigured
from django.utils.module_loading import import_string

from accounts.models import UserType

ANONYMOUS = "anonymous"
AUTHENTICATED = "authenticated"
IMPERSONATING = "impersonating"


def _has_permission(user, permission: str) -> bool:
    if permission == ANONYMOUS:
        return not user.is_authenticated
    if permission == AUTHENTICATED:
        return user.is_authenticated
    if permission == IMPERSONATING:
        # Convenção do django-hijack
        return bool(getattr(user, "is_hijacked", False))
    if permission in UserType.values:
        return user.is_authenticated and getattr(user, "get_tipo_usuario", None) == permission
    return user.has_perm(permission)


def can_view_menu_item(user, item) -> bool:
    """Retorna True se o usuário puder ver o item (basta uma das permissões)."""
    perms = item.permissions or []
    if not perms:
        return True
    return any(_has_permission(user, str(perm)) for perm in perms)


def get_permission_checker():
    path = getattr(settings, "MENU_PERMISSION_CHECKER", "core.permissions.can_view_menu_item")
    try:
        return import_string(path)
    except ImportError as exc:
        raise ImproperlyConfigured(f"MENU_PERMISSION_CHECKER '{path}' não pôde ser importado.") from exc
