"""Painel URL Configuration."""

from django.contrib import admin
from django.urls import include, path
from django.views.i18n import JavaScriptCatalog

urlpatterns = [
    # Django admin
    path("admin/", admin.site.urls),
    # Dashboard (destino dos links de menu e das páginas CRUD)
    path("", include(("core.urls", "core"), namespace="core")),
    path("accounts/", include(("accounts.urls", "accounts"), namespace="accounts")),
    path("jsi18n/", JavaScriptCatalog.as_view(), name="javascript-catalog"),
    # APIs REST
    path("api/", include(("core.api_urls", "core_api"), namespace="core_api")),
    path("", include("django_prometheus.urls")),
]
