from django import template

register = template.Library()


@register.filter
def menu_item_selected(item, main_menu) -> bool:
    """Uso: ``{% if item|menu_item_selected:MAIN_MENU %}``."""
    if item is None or not main_menu:
        return False
    return main_menu.is_selected(item)


@register.filter
def menu_item_expanded(item, main_menu) -> bool:
    if item is None or not main_menu:
        return False
    return main_menu.is_expanded(item)
