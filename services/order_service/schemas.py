from datetime import date
from pydantic import BaseModel, ConfigDict
from .models import OrderStatus

class OrderResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True, frozen=True)

    order_id: int
    product_id: int
    customer_name: str
    quantity: int
    order_date: date
    status: OrderStatus
