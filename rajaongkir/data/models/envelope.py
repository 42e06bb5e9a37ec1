"""
Response envelopes for every RajaOngkir endpoint.
Each reply is wrapped as {"rajaongkir": {"query": ..., "status": ..., "results": ...}};
the shape of "results" differs per call, so each call decodes into its own envelope type.
"""
from dataclasses import dataclass, field
from typing import Any, Callable, TypeVar

from rajaongkir.api.errors import DecodeError
from rajaongkir.data.models.city import City
from rajaongkir.data.models.cost import CarrierService, OriginDestination
from rajaongkir.data.models.fields import integer, objects, text
from rajaongkir.data.models.province import Province
from rajaongkir.data.models.subdistrict import Subdistrict

T = TypeVar("T")


@dataclass(frozen=True)
class Status:
    code: int = 0
    description: str = ""

    @property
    def ok(self) -> bool:
        return 200 <= self.code < 300

    @staticmethod
    def from_dict(d: Any) -> "Status":
        if d is None:
            return Status()
        if not isinstance(d, dict):
            raise DecodeError(f"status must be an object, got {type(d).__name__}")
        return Status(code=integer(d, "code"), description=text(d, "description"))


def _unwrap(payload: Any) -> dict[str, Any]:
    body = payload.get("rajaongkir") if isinstance(payload, dict) else None
    if not isinstance(body, dict):
        raise DecodeError("response is not a rajaongkir envelope")
    return body


def _query(body: dict[str, Any]) -> dict[str, Any]:
    # Echo of the request parameters; kept for display only.
    q = body.get("query")
    return dict(q) if isinstance(q, dict) else {}


def _single(results: Any, decode: Callable[[dict[str, Any]], T], empty: T) -> T:
    if results is None:
        return empty
    if not isinstance(results, dict):
        raise DecodeError(f"expected results to be an object, got {type(results).__name__}")
    return decode(results)


def _details(d: Any) -> OriginDestination:
    # Absent when the lookup failed.
    return OriginDestination.from_dict(d) if isinstance(d, dict) else OriginDestination()


def _many(body: dict[str, Any], decode: Callable[[dict[str, Any]], T]) -> tuple[T, ...]:
    return objects(body.get("results"), "results", decode)


@dataclass(frozen=True)
class ProvincesResponse:
    status: Status
    results: tuple[Province, ...] = ()
    query: dict[str, Any] = field(default_factory=dict)

    @staticmethod
    def from_dict(payload: Any) -> "ProvincesResponse":
        body = _unwrap(payload)
        return ProvincesResponse(
            status=Status.from_dict(body.get("status")),
            results=_many(body, Province.from_dict),
            query=_query(body),
        )


@dataclass(frozen=True)
class ProvinceResponse:
    status: Status
    results: Province = field(default_factory=Province)
    query: dict[str, Any] = field(default_factory=dict)

    @staticmethod
    def from_dict(payload: Any) -> "ProvinceResponse":
        body = _unwrap(payload)
        return ProvinceResponse(
            status=Status.from_dict(body.get("status")),
            results=_single(body.get("results"), Province.from_dict, Province()),
            query=_query(body),
        )


@dataclass(frozen=True)
class CitiesResponse:
    status: Status
    results: tuple[City, ...] = ()
    query: dict[str, Any] = field(default_factory=dict)

    @staticmethod
    def from_dict(payload: Any) -> "CitiesResponse":
        body = _unwrap(payload)
        return CitiesResponse(
            status=Status.from_dict(body.get("status")),
            results=_many(body, City.from_dict),
            query=_query(body),
        )


@dataclass(frozen=True)
class CityResponse:
    status: Status
    results: City = field(default_factory=City)
    query: dict[str, Any] = field(default_factory=dict)

    @staticmethod
    def from_dict(payload: Any) -> "CityResponse":
        body = _unwrap(payload)
        return CityResponse(
            status=Status.from_dict(body.get("status")),
            results=_single(body.get("results"), City.from_dict, City()),
            query=_query(body),
        )


@dataclass(frozen=True)
class SubdistrictsResponse:
    status: Status
    results: tuple[Subdistrict, ...] = ()
    query: dict[str, Any] = field(default_factory=dict)

    @staticmethod
    def from_dict(payload: Any) -> "SubdistrictsResponse":
        body = _unwrap(payload)
        return SubdistrictsResponse(
            status=Status.from_dict(body.get("status")),
            results=_many(body, Subdistrict.from_dict),
            query=_query(body),
        )


@dataclass(frozen=True)
class SubdistrictResponse:
    status: Status
    results: Subdistrict = field(default_factory=Subdistrict)
    query: dict[str, Any] = field(default_factory=dict)

    @staticmethod
    def from_dict(payload: Any) -> "SubdistrictResponse":
        body = _unwrap(payload)
        return SubdistrictResponse(
            status=Status.from_dict(body.get("status")),
            results=_single(body.get("results"), Subdistrict.from_dict, Subdistrict()),
            query=_query(body),
        )


@dataclass(frozen=True)
class CostResponse:
    status: Status
    results: tuple[CarrierService, ...] = ()
    origin_details: OriginDestination = field(default_factory=OriginDestination)
    destination_details: OriginDestination = field(default_factory=OriginDestination)
    query: dict[str, Any] = field(default_factory=dict)

    @staticmethod
    def from_dict(payload: Any) -> "CostResponse":
        body = _unwrap(payload)
        return CostResponse(
            status=Status.from_dict(body.get("status")),
            results=_many(body, CarrierService.from_dict),
            origin_details=_details(body.get("origin_details")),
            destination_details=_details(body.get("destination_details")),
            query=_query(body),
        )
