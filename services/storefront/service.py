import structlog

from services.order_service.service import OrderService
from services.product_service.service import ProductService
from .assembler import assemble
from .schemas import ProductOrderView

logger = structlog.get_logger(__name__)

ABOUT_MESSAGE = "Your application description page."
CONTACT_MESSAGE = "Your contact page."

class StorefrontService:
    @staticmethod
    def get_product_orders() -> list[ProductOrderView]:
        products = ProductService.list_products()
        orders = OrderService.list_orders()

        rows = assemble(orders, products)
        logger.info(
            "product_orders_assembled",
            orders=len(orders),
            products=len(products),
            rows=len(rows),
        )
        return rows
