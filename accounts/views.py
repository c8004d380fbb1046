import logging

from django.contrib.auth import logout
from django.contrib.auth.views import LoginView
from django.shortcuts import redirect

logger = logging.getLogger(__name__)


class PainelLoginView(LoginView):
    template_name = "accounts/login.html"
    redirect_authenticated_user = True


login_view = PainelLoginView.as_view()


def logout_view(request):
    if request.user.is_authenticated:
        logger.info("logout", extra={"user": request.user.pk})
    logout(request)
    return redirect("accounts:login")
