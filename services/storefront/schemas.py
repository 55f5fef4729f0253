from datetime import date
from pydantic import BaseModel, ConfigDict
from services.order_service.models import OrderStatus

class ProductOrderView(BaseModel):
    """One order joined with the product it references."""
    model_config = ConfigDict(frozen=True)

    order_id: int
    product_id: int
    product_name: str
    category: str
    price: int
    customer_name: str
    quantity: int
    order_date: date
    status: OrderStatus
    total_price: int # price * quantity at join time
