from prometheus_client import Counter

restaurant_operations_total = Counter(
    "restaurant_operations_total", "Total restaurant write operations", ["operation"]
)

menus_removed_total = Counter(
    "restaurant_menus_removed_total", "Total menus deleted as orphans or by cascade"
)

payments_created_total = Counter(
    "restaurant_payments_created_total", "Total payment methods registered"
)
