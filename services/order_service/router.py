from fastapi import APIRouter, HTTPException
from .schemas import OrderResponse
from .service import OrderService

router = APIRouter()
public_router = APIRouter()

@public_router.get("/health")
async def health_check():
    return {"service": "order", "status": "running"}

@router.get("/", response_model=list[OrderResponse])
async def list_orders():
    return OrderService.list_orders()

@router.get("/{order_id}", response_model=OrderResponse)
async def get_order(order_id: int):
    order = OrderService.get_order(order_id)
    if not order:
        raise HTTPException(status_code=404, detail="Order not found")
    return order
