from django.http import HttpResponse
from django.urls import path

from Painel.urls import urlpatterns as painel_urlpatterns


def relatorio(request, ano):
    return HttpResponse(f"relatorio {ano}")


urlpatterns = [
    path("relatorios/<int:ano>/", relatorio, name="relatorio"),
] + painel_urlpatterns
