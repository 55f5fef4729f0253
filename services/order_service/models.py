from dataclasses import dataclass
from datetime import date
from enum import Enum


class OrderStatus(str, Enum):
    SHIPPED = "Shipped"
    PROCESSING = "Processing"
    DELIVERED = "Delivered"


@dataclass(frozen=True)
class Order:
    order_id: int
    product_id: int # refers to Product.id, may not resolve
    customer_name: str
    quantity: int
    order_date: date
    status: OrderStatus
