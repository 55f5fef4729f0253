from .models import Product
from .repository import ProductRepository

class ProductService:

    @staticmethod
    def list_products() -> tuple[Product, ...]:
        return ProductRepository.get_all_products()

    @staticmethod
    def get_product_by_id(product_id: int) -> Product | None:
        return ProductRepository.get_product_by_id(product_id)
