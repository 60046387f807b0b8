"""Cart domain model, independent of HTTP and the ORM."""
from dataclasses import dataclass, field
from numbers import Number
from typing import Optional, Tuple


@dataclass(frozen=True)
class Product:
    id: int
    description: str
    amount: Number


@dataclass(frozen=True)
class Cart:
    id: Optional[int] = None
    products: Tuple[Product, ...] = field(default_factory=tuple)
