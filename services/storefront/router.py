from pathlib import Path

from fastapi import APIRouter, Request
from fastapi.responses import HTMLResponse
from fastapi.templating import Jinja2Templates

from shared.observability import storefront_page_views_total
from .schemas import ProductOrderView
from .service import StorefrontService, ABOUT_MESSAGE, CONTACT_MESSAGE

templates = Jinja2Templates(directory=str(Path(__file__).parent / "templates"))

router = APIRouter()
public_router = APIRouter()

@public_router.get("/health")
async def health_check():
    return {"service": "storefront", "status": "running"}

# --- PAGES ---

@router.get("/", response_class=HTMLResponse)
async def index(request: Request):
    storefront_page_views_total.labels(page="index").inc()
    rows = StorefrontService.get_product_orders()
    return templates.TemplateResponse(
        request, "index.html", {"title": "Home Page", "rows": rows}
    )

@router.get("/about", response_class=HTMLResponse)
async def about(request: Request):
    storefront_page_views_total.labels(page="about").inc()
    return templates.TemplateResponse(
        request, "about.html", {"title": "About", "message": ABOUT_MESSAGE}
    )

@router.get("/contact", response_class=HTMLResponse)
async def contact(request: Request):
    storefront_page_views_total.labels(page="contact").inc()
    return templates.TemplateResponse(
        request, "contact.html", {"title": "Contact", "message": CONTACT_MESSAGE}
    )

# --- JSON ---

@router.get("/api/product-orders", response_model=list[ProductOrderView])
async def list_product_orders():
    return StorefrontService.get_product_orders()
