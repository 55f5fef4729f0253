from dataclasses import dataclass


@dataclass(frozen=True)
class Product:
    id: int
    name: str
    price: int # whole currency units, never negative
    category: str
