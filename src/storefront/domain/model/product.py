"""Product value as served by the catalog.

Products are owned by the backend catalog; the storefront never
mutates them, it only reads and references them from cart lines.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from storefront.domain.exceptions import ValidationError
from storefront.domain.model.value_objects import Money


@dataclass(frozen=True)
class Classification:
    """An optional label plus the numeric id used for filtering."""

    id: int
    label: str | None = None

    def display(self) -> str:
        return self.label or "-"


@dataclass(frozen=True)
class Product:
    id: str
    description: str
    price: Money
    group: Classification | None = None
    category: Classification | None = None
    brand: Classification | None = None
    color: Classification | None = None
    available: bool = True

    def __post_init__(self) -> None:
        if not self.id:
            raise ValidationError("Product id is required")

    @staticmethod
    def from_api(raw: dict[str, Any]) -> Product:
        """Build a Product from one entry of the catalog ``products`` list."""
        try:
            return Product(
                id=str(raw["id"]),
                description=str(raw.get("description") or ""),
                price=Money.of(raw["price"]),
                group=_classification(raw, "group"),
                category=_classification(raw, "category"),
                brand=_classification(raw, "brand"),
                color=_classification(raw, "color"),
                available=bool(raw.get("available", True)),
            )
        except (KeyError, TypeError, ValueError) as exc:
            raise ValidationError(f"Malformed product record: {raw!r}") from exc


def _classification(raw: dict[str, Any], kind: str) -> Classification | None:
    ident = raw.get(f"{kind}_id")
    if ident is None:
        return None
    return Classification(id=int(ident), label=raw.get(kind))
