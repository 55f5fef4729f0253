from datetime import date
from .models import Order, OrderStatus

ORDERS: tuple[Order, ...] = (
    Order(order_id=1001, product_id=1, customer_name="John Smith", quantity=2,
          order_date=date(2026, 1, 15), status=OrderStatus.SHIPPED),
    Order(order_id=1002, product_id=2, customer_name="Sarah Johnson", quantity=5,
          order_date=date(2026, 1, 16), status=OrderStatus.PROCESSING),
    Order(order_id=1003, product_id=3, customer_name="Mike Brown", quantity=3,
          order_date=date(2026, 1, 17), status=OrderStatus.DELIVERED),
    Order(order_id=1004, product_id=1, customer_name="Emily Davis", quantity=1,
          order_date=date(2026, 1, 18), status=OrderStatus.SHIPPED),
    Order(order_id=1005, product_id=4, customer_name="David Wilson", quantity=2,
          order_date=date(2026, 1, 19), status=OrderStatus.PROCESSING),
    Order(order_id=1006, product_id=5, customer_name="Lisa Anderson", quantity=4,
          order_date=date(2026, 1, 20), status=OrderStatus.DELIVERED),
    Order(order_id=1007, product_id=2, customer_name="Tom Martinez", quantity=10,
          order_date=date(2026, 1, 21), status=OrderStatus.SHIPPED),
    Order(order_id=1008, product_id=3, customer_name="Anna Taylor", quantity=2,
          order_date=date(2026, 1, 22), status=OrderStatus.PROCESSING),
)

class OrderRepository:
    @staticmethod
    def get_all_orders() -> tuple[Order, ...]:
        return ORDERS

    @staticmethod
    def get_order(order_id: int) -> Order | None:
        return next((o for o in ORDERS if o.order_id == order_id), None)
