from fastapi import APIRouter, HTTPException
from .schemas import ProductResponse
from .service import ProductService

router = APIRouter()
public_router = APIRouter()  # For any public endpoints (e.g. health check)

@public_router.get("/health")
async def health_check():
    return {"service": "product", "status": "running"}


@router.get("/", response_model=list[ProductResponse])
async def list_products():
    return ProductService.list_products()

@router.get("/{product_id}", response_model=ProductResponse)
async def get_product(product_id: int):
    product = ProductService.get_product_by_id(product_id)
    if not product:
        raise HTTPException(status_code=404, detail="Product not found")
    return product
