from dataclasses import dataclass
from typing import Tuple


@dataclass(frozen=True)
class ToyCar:
    model: str
    price: float


@dataclass(frozen=True)
class Expense:
    id: int
    amount: float


@dataclass(frozen=True)
class ShoppingCart:
    items: Tuple[str, ...]
    total: float


@dataclass(frozen=True)
class OrderStatus:
    order_id: int
    status: str


@dataclass(frozen=True)
class Connection:
    host: str
    port: str
