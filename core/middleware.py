from django.utils.functional import SimpleLazyObject

from .context import AdminContext


class AdminContextMiddleware:
    """Anexa ``request.admin_context``, montado apenas quando usado."""

    def __init__(self, get_response):
        self.get_response = get_response

    def __call__(self, request):
        request.admin_context = SimpleLazyObject(lambda: AdminContext.from_request(request))
        return self.get_response(request)
