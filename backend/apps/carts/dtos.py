from dataclasses import dataclass, field
from numbers import Number
from typing import List, Optional


@dataclass
class ProductDTO:
    id: int
    description: str
    amount: Number


@dataclass
class CartDTO:
    id: Optional[int] = None
    products: List[ProductDTO] = field(default_factory=list)
"""Wire-shape dataclasses rendered and parsed by serializers.py."""
