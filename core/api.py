from rest_framework.permissions import AllowAny
from rest_framework.response import Response
from rest_framework.views import APIView

from .menu import build_main_menu, build_user_menu
from .serializers import MainMenuSerializer, UserMenuSerializer


class MenuAPIView(APIView):
    """Menus já filtrados para o usuário, para clientes que renderizam no front-end."""

    # Os itens já são filtrados pelo checker de permissões do menu
    permission_classes = [AllowAny]

    def get(self, request):
        user_menu = build_user_menu(request)
        return Response(
            {
                "main_menu": MainMenuSerializer(build_main_menu(request)).data,
                "user_menu": UserMenuSerializer(user_menu).data if user_menu else None,
            }
        )
