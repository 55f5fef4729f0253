from .models import Order
from .repository import OrderRepository

class OrderService:
    @staticmethod
    def list_orders() -> tuple[Order, ...]:
        return OrderRepository.get_all_orders()

    @staticmethod
    def get_order(order_id: int) -> Order | None:
        return OrderRepository.get_order(order_id)
