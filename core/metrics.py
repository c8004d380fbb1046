from prometheus_client import Counter, Histogram

MENU_BUILD_LATENCY = Histogram(
    "admin_menu_build_seconds",
    "Time spent building admin menus",
    ["menu"],
    buckets=(0.001, 0.005, 0.01, 0.05, 0.1, 0.5),
)

MENU_ITEMS_HIDDEN = Counter(
    "admin_menu_items_hidden_total",
    "Menu items hidden by the permission checker",
    ["menu"],
)
