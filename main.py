from fastapi import FastAPI
import structlog

from shared.config import settings
from shared.observability import setup_observability

from services.product_service.main import product_app
from services.product_service.service import ProductService
from services.order_service.main import order_app
from services.order_service.service import OrderService
from services.storefront.router import router as storefront_router
from services.storefront.router import public_router as storefront_public_router

logger = structlog.get_logger(__name__)

app = FastAPI(title=settings.APP_TITLE)

# --- OBSERVABILITY BOOTSTRAP ---
setup_observability(app, "storefront")

@app.on_event("startup")
async def startup_event():
    logger.info(
        "cluster_started",
        products=len(ProductService.list_products()),
        orders=len(OrderService.list_orders()),
    )

# Storefront pages live on the root app itself; a mount at "/" would swallow
# "/products" and "/orders" before the trailing-slash redirect runs
app.include_router(storefront_public_router)
app.include_router(storefront_router)

app.mount("/products", product_app)
app.mount("/orders", order_app)
