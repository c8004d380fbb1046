from django.urls import path

from .api import MenuAPIView

urlpatterns = [
    path("menu/", MenuAPIView.as_view(), name="menu"),
]
