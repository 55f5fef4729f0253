from datetime import date

from services.order_service.models import Order, OrderStatus
from services.product_service.models import Product


def make_product(id, price=100, name=None, category="Electronics"):
    return Product(id=id, name=name or f"Product {id}", price=price, category=category)


def make_order(order_id, product_id, quantity=1, customer_name="Test Customer",
               order_date=date(2026, 1, 15), status=OrderStatus.SHIPPED):
    return Order(
        order_id=order_id,
        product_id=product_id,
        customer_name=customer_name,
        quantity=quantity,
        order_date=order_date,
        status=status,
    )
