"""Pydantic wire models for hledger JSON balance reports.

hledger's own key names (``prDates``, ``prrAmounts``, ``acommodity``...) are
canonical. Their short forms (``dates``, ``amounts``, ``commodity``...) are
accepted through ``AliasChoices``. These models only describe the payload;
``parsing`` converts them into the frozen domain records.
"""

from __future__ import annotations

from typing import Annotated, Any, Literal

from pydantic import (
    AliasChoices,
    BaseModel,
    BeforeValidator,
    ConfigDict,
    Field,
    StrictFloat,
    StrictInt,
    StrictStr,
    TypeAdapter,
)


def _unwrap_contents(value: Any) -> Any:
    # Newer hledger releases tag some scalars as {"tag": ..., "contents": ...}.
    if isinstance(value, dict) and "contents" in value:
        return value["contents"]
    return value


TaggedInt = Annotated[StrictInt, BeforeValidator(_unwrap_contents)]
HledgerDay = Annotated[StrictStr, BeforeValidator(_unwrap_contents)]


class HledgerQuantity(BaseModel):
    """Exact and floating representations of an amount."""

    model_config = ConfigDict(extra="ignore")

    decimal_mantissa: StrictInt = Field(validation_alias="decimalMantissa")
    decimal_places: StrictInt = Field(validation_alias="decimalPlaces")
    # Whole values are encoded without a fractional part.
    floating_point: StrictInt | StrictFloat = Field(
        validation_alias="floatingPoint"
    )


class HledgerStyle(BaseModel):
    """Display style of an amount."""

    model_config = ConfigDict(extra="ignore")

    side: Literal["L", "R"] = Field(
        validation_alias=AliasChoices("ascommodityside", "commoditySide")
    )
    spaced: bool = Field(
        validation_alias=AliasChoices("ascommodityspaced", "commoditySpaced")
    )
    decimal_point: StrictStr | None = Field(
        default=".",
        validation_alias=AliasChoices(
            "asdecimalpoint",
            "asdecimalmark",
            "decimalPoint",
        ),
    )
    digit_groups: tuple[StrictStr, list[StrictInt]] | None = Field(
        default=None,
        validation_alias=AliasChoices("asdigitgroups", "digitGroups"),
    )
    precision: TaggedInt = Field(
        validation_alias=AliasChoices("asprecision", "precision")
    )


class HledgerAmount(BaseModel):
    """One commodity amount."""

    model_config = ConfigDict(extra="ignore")

    commodity: StrictStr = Field(
        validation_alias=AliasChoices("acommodity", "commodity")
    )
    quantity: HledgerQuantity = Field(
        validation_alias=AliasChoices("aquantity", "quantity")
    )
    style: HledgerStyle = Field(
        validation_alias=AliasChoices("astyle", "style")
    )
    price: HledgerPrice | None = Field(
        default=None,
        validation_alias=AliasChoices("aprice", "price"),
    )


class HledgerPrice(BaseModel):
    """Tagged unit or total price attached to an amount."""

    tag: StrictStr
    contents: HledgerAmount


HledgerAmount.model_rebuild()


class HledgerPeriodRow(BaseModel):
    """One account row of a multi-period report."""

    model_config = ConfigDict(extra="ignore")

    name: StrictStr = Field(validation_alias=AliasChoices("prrName", "name"))
    amounts: list[list[HledgerAmount]] = Field(
        validation_alias=AliasChoices("prrAmounts", "amounts")
    )
    total: list[HledgerAmount] = Field(
        default_factory=list,
        validation_alias=AliasChoices("prrTotal", "total"),
    )
    average: list[HledgerAmount] = Field(
        default_factory=list,
        validation_alias=AliasChoices("prrAverage", "average"),
    )


class HledgerTotalsRow(BaseModel):
    """Aggregate row of a multi-period report."""

    model_config = ConfigDict(extra="ignore")

    names: list[StrictStr] = Field(
        default_factory=list,
        validation_alias=AliasChoices("prrName", "name"),
    )
    amounts: list[list[HledgerAmount]] = Field(
        validation_alias=AliasChoices("prrAmounts", "amounts")
    )
    total: list[HledgerAmount] = Field(
        default_factory=list,
        validation_alias=AliasChoices("prrTotal", "total"),
    )
    average: list[HledgerAmount] = Field(
        default_factory=list,
        validation_alias=AliasChoices("prrAverage", "average"),
    )


class HledgerPeriodReport(BaseModel):
    """Payload of ``hledger bal -M -O json``."""

    model_config = ConfigDict(extra="ignore")

    dates: list[tuple[HledgerDay, HledgerDay]] = Field(
        validation_alias=AliasChoices("prDates", "dates")
    )
    rows: list[HledgerPeriodRow] = Field(
        validation_alias=AliasChoices("prRows", "rows")
    )
    totals: HledgerTotalsRow = Field(
        validation_alias=AliasChoices("prTotals", "totals")
    )


# Account rows of ``hledger bal -O json``: name, display name, depth, amounts.
HledgerAccountRow = tuple[StrictStr, StrictStr, StrictInt, list[HledgerAmount]]

ACCOUNT_ROW_ADAPTER: TypeAdapter[HledgerAccountRow] = TypeAdapter(
    HledgerAccountRow
)


__all__ = [
    "HledgerQuantity",
    "HledgerStyle",
    "HledgerAmount",
    "HledgerPrice",
    "HledgerPeriodRow",
    "HledgerTotalsRow",
    "HledgerPeriodReport",
    "HledgerAccountRow",
    "ACCOUNT_ROW_ADAPTER",
]
