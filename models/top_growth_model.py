import math
from dataclasses import dataclass

from utils.errors import InvalidInput


@dataclass(frozen=True)
class Product:
    name: str
    sku: str
    predicted_increase_percent: float

    def __post_init__(self):
        if not math.isfinite(self.predicted_increase_percent):
            raise InvalidInput(f"product {self.name!r} has a non-finite predicted increase")

    @classmethod
    def from_dict(cls, data: dict):
        """Accepts the provider's `predicted_increase` key or the long form."""
        if not isinstance(data, dict):
            raise InvalidInput(f"product entries must be objects, got {type(data).__name__}")
        raw = data.get("predicted_increase_percent", data.get("predicted_increase"))
        try:
            increase = float(raw)
        except (TypeError, ValueError) as e:
            raise InvalidInput(f"product {data.get('name')!r} has no numeric predicted increase") from e
        return cls(
            name=str(data.get("name", "")),
            sku=str(data.get("sku", data.get("SKU", ""))),
            predicted_increase_percent=increase,
        )

    def to_dict(self) -> dict:
        return {
            "name": self.name,
            "sku": self.sku,
            "predicted_increase": self.predicted_increase_percent,
        }


def coerce_products(products):
    if not isinstance(products, (list, tuple)):
        raise InvalidInput(f"products must be a list, got {type(products).__name__}")
    return [p if isinstance(p, Product) else Product.from_dict(p) for p in products]


def select_top_growth_product(products) -> Product:
    """
    Left-to-right scan keeping the first maximum; a later equal value never replaces it.
    """
    products = coerce_products(products or [])
    if not products:
        raise InvalidInput("cannot select a top growth product from an empty list")

    best = products[0]
    for candidate in products[1:]:
        if candidate.predicted_increase_percent > best.predicted_increase_percent:
            best = candidate
    return best


def rank_top_growth_products(products, limit: int = 5) -> list:
    # sorted() is stable, so ties keep input order
    products = coerce_products(products or [])
    ranked = sorted(products, key=lambda p: p.predicted_increase_percent, reverse=True)
    return ranked[:max(0, int(limit))]
