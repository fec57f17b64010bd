"""Domain models for hledger commodity amounts."""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal
from enum import Enum


class Side(Enum):
    """Placement of the commodity symbol relative to the number."""

    LEFT = "L"
    RIGHT = "R"


@dataclass(frozen=True)
class DigitGroups:
    """Digit grouping rule, e.g. ``(",", (3,))`` for ``1,234,567``."""

    separator: str
    sizes: tuple[int, ...]


@dataclass(frozen=True)
class AmountStyle:
    """Display style attached to an amount by hledger.

    Attributes:
        side: Symbol placement.
        spaced: Whether a space separates symbol and number.
        decimal_point: Decimal mark character.
        digit_groups: Optional thousands grouping rule.
        precision: Number of displayed decimal places.
    """

    side: Side
    spaced: bool
    decimal_point: str
    digit_groups: DigitGroups | None
    precision: int


@dataclass(frozen=True)
class Quantity:
    """Quantity in its three redundant encodings.

    ``floating_point`` is authoritative for computation. The mantissa and
    decimal places mirror the source report.
    """

    decimal_mantissa: int
    decimal_places: int
    floating_point: float

    def as_decimal(self) -> Decimal:
        """Return the exact quantity rebuilt from mantissa and places."""
        return Decimal(self.decimal_mantissa).scaleb(-self.decimal_places)


@dataclass(frozen=True)
class PriceListing:
    """Optional price annotation on a commodity amount."""

    tag: str
    contents: Commodity


@dataclass(frozen=True)
class Commodity:
    """A single currency-denominated quantity with its display metadata."""

    code: str
    quantity: Quantity
    style: AmountStyle
    price: PriceListing | None = None

    @property
    def amount(self) -> float:
        """Return the floating value used by the metrics engine."""
        return self.quantity.floating_point


__all__ = [
    "Side",
    "DigitGroups",
    "AmountStyle",
    "Quantity",
    "PriceListing",
    "Commodity",
]
