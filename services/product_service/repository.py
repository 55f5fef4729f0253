from .models import Product

# The catalog is fixed: there is no backing store, every call sees the same records
CATALOG: tuple[Product, ...] = (
    Product(id=1, name="Laptop", price=999, category="Electronics"),
    Product(id=2, name="Mouse", price=29, category="Electronics"),
    Product(id=3, name="Keyboard", price=79, category="Electronics"),
    Product(id=4, name="Monitor", price=299, category="Electronics"),
    Product(id=5, name="Desk Chair", price=199, category="Furniture"),
)

class ProductRepository:

    @staticmethod
    def get_all_products() -> tuple[Product, ...]:
        return CATALOG

    @staticmethod
    def get_product_by_id(product_id: int) -> Product | None:
        return next((p for p in CATALOG if p.id == product_id), None)
