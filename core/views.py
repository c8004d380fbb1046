from django.contrib.auth.mixins import LoginRequiredMixin
from django.views.generic import TemplateView

from .context import get_admin_context


class DashboardView(LoginRequiredMixin, TemplateView):
    """Página inicial do painel; também recebe os links CRUD do menu."""

    template_name = "core/dashboard.html"

    def get_context_data(self, **kwargs):
        context = super().get_context_data(**kwargs)
        admin_context = get_admin_context(self.request)
        crud_controller = self.request.GET.get("crudController")
        context.update(
            {
                "dashboard_title": admin_context.dashboard.title,
                "crud_controller": crud_controller,
                "crud_action": self.request.GET.get("crudAction"),
                "crud_entity": admin_context.crud_controllers.entity_for_controller(crud_controller),
            }
        )
        return context


dashboard = DashboardView.as_view()
