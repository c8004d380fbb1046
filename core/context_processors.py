from django.utils.functional import SimpleLazyObject


def admin_menu(request):
    from .menu import build_main_menu, build_user_menu

    return {
        "MAIN_MENU": SimpleLazyObject(lambda: build_main_menu(request)),
        "USER_MENU": SimpleLazyObject(lambda: build_user_menu(request)),
    }
