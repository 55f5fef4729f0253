from .setup import setup_observability
from .metrics import (
    storefront_page_views_total,
    storefront_unmatched_orders_total,
    storefront_assemble_duration_seconds,
)
