from fastapi import FastAPI
from .router import router, public_router

product_app = FastAPI(
    title="Product Service",
    version="1.0.0"
)

# Observability is bootstrapped once, by the cluster app that mounts this one
product_app.include_router(public_router)
product_app.include_router(router)
