from prometheus_client import Counter, Histogram

# Business Metrics
storefront_page_views_total = Counter(
    "storefront_page_views_total",
    "Total storefront pages rendered",
    ["page"] # Labels: 'index', 'about', 'contact'
)

storefront_unmatched_orders_total = Counter(
    "storefront_unmatched_orders_total",
    "Orders dropped from the joined view because their product is not in the catalog"
)

storefront_assemble_duration_seconds = Histogram(
    "storefront_assemble_duration_seconds",
    "Time spent joining orders with the product catalog"
)
