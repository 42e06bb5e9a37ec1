"""
Shipping cost records returned by POST /cost.
A carrier service (e.g. JNE) holds one Cost per service tier, each with one or more priced values.
"""
from dataclasses import dataclass, field
from typing import Any

from rajaongkir.data.models.fields import integer, objects, text


@dataclass(frozen=True)
class CostValue:
    value: int = 0
    etd: str = ""
    note: str = ""

    @staticmethod
    def from_dict(d: dict[str, Any]) -> "CostValue":
        return CostValue(
            value=integer(d, "value"),
            etd=text(d, "etd"),
            note=text(d, "note"),
        )


@dataclass(frozen=True)
class Cost:
    service: str = ""
    description: str = ""
    cost: tuple[CostValue, ...] = field(default_factory=tuple)

    @staticmethod
    def from_dict(d: dict[str, Any]) -> "Cost":
        return Cost(
            service=text(d, "service"),
            description=text(d, "description"),
            cost=objects(d.get("cost"), "cost", CostValue.from_dict),
        )


@dataclass(frozen=True)
class CarrierService:
    code: str = ""
    name: str = ""
    costs: tuple[Cost, ...] = field(default_factory=tuple)

    @staticmethod
    def from_dict(d: dict[str, Any]) -> "CarrierService":
        return CarrierService(
            code=text(d, "code"),
            name=text(d, "name"),
            costs=objects(d.get("costs"), "costs", Cost.from_dict),
        )


@dataclass(frozen=True)
class OriginDestination:
    """Location details echoed back for the origin and destination of a cost query.

    Which fields are filled depends on whether the location was a city or a subdistrict.
    """

    subdistrict_id: str = ""
    province_id: str = ""
    province: str = ""
    city_id: str = ""
    city_name: str = ""
    city: str = ""
    type: str = ""
    subdistrict_name: str = ""
    postal_code: str = ""

    @staticmethod
    def from_dict(d: dict[str, Any]) -> "OriginDestination":
        return OriginDestination(
            subdistrict_id=text(d, "subdistrict_id"),
            province_id=text(d, "province_id"),
            province=text(d, "province"),
            city_id=text(d, "city_id"),
            city_name=text(d, "city_name"),
            city=text(d, "city"),
            type=text(d, "type"),
            subdistrict_name=text(d, "subdistrict_name"),
            postal_code=text(d, "postal_code"),
        )
