"""
Joins the order list with the product catalog.

The join is an INNER join on ``Order.product_id == Product.id``: an order whose
product is missing from the catalog is left out of the result, it is not an
error. Should the catalog ever carry duplicate ids, every matching product
yields its own row (one row per matching pair, in catalog order).
"""
from collections import defaultdict
from typing import Iterable

import structlog

from shared.observability import (
    storefront_unmatched_orders_total,
    storefront_assemble_duration_seconds,
)
from services.order_service.models import Order
from services.product_service.models import Product
from .schemas import ProductOrderView

logger = structlog.get_logger(__name__)


def _project(order: Order, product: Product) -> ProductOrderView:
    return ProductOrderView(
        order_id=order.order_id,
        product_id=product.id,
        product_name=product.name,
        category=product.category,
        price=product.price,
        customer_name=order.customer_name,
        quantity=order.quantity,
        order_date=order.order_date,
        status=order.status,
        total_price=product.price * order.quantity,
    )


def assemble(orders: Iterable[Order], products: Iterable[Product]) -> list[ProductOrderView]:
    """Return the projected rows, orders outer, in input order."""
    with storefront_assemble_duration_seconds.time():
        by_id: dict[int, list[Product]] = defaultdict(list)
        for product in products:
            by_id[product.id].append(product)

        rows = []
        for order in orders:
            matches = by_id.get(order.product_id)
            if not matches:
                logger.debug(
                    "order_without_product",
                    order_id=order.order_id,
                    product_id=order.product_id,
                )
                storefront_unmatched_orders_total.inc()
                continue
            rows.extend(_project(order, product) for product in matches)

    return rows
