"""
API Client module providing centralized access to RajaOngkir API endpoints.
Orchestrates sub-API modules for provinces, cities, subdistricts, and costs,
and unwraps their envelopes into domain records.
"""
import logging

import requests

from rajaongkir.api.cities import CitiesAPI
from rajaongkir.api.costs import CostsAPI
from rajaongkir.api.errors import EmptyResultError, check_status
from rajaongkir.api.handle_requests import DEFAULT_TIMEOUT, RequestHandler
from rajaongkir.api.provinces import ProvincesAPI
from rajaongkir.api.subdistricts import SubdistrictsAPI
from rajaongkir.data.models.city import City
from rajaongkir.data.models.cost import Cost
from rajaongkir.data.models.envelope import CostResponse, Status
from rajaongkir.data.models.province import Province
from rajaongkir.data.models.subdistrict import Subdistrict

DEFAULT_BASE_URL = "https://pro.rajaongkir.com/api"


class RajaOngkir:
    """Root client that centralizes sub-APIs and holds the key and HTTP handler.

    list_cities, list_subdistricts and get_subdistrict do not check the envelope
    status unless strict_status is set; the other calls always do.
    """

    def __init__(
        self,
        api_key: str,
        base_url: str = DEFAULT_BASE_URL,
        session: requests.Session | None = None,
        *,
        timeout: float = DEFAULT_TIMEOUT,
        strict_status: bool = False,
    ):
        self.api_key = api_key
        self.base_url = base_url
        self.strict_status = strict_status
        self.http = RequestHandler(base_url, session=session, timeout=timeout)
        self.provinces = ProvincesAPI(self)
        self.cities = CitiesAPI(self)
        self.subdistricts = SubdistrictsAPI(self)
        self.costs = CostsAPI(self)

    def close(self) -> None:
        self.http.close()

    def __enter__(self) -> "RajaOngkir":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()

    def _check_lenient(self, status: Status, call: str) -> None:
        if self.strict_status:
            check_status(status)
        elif not status.ok:
            logging.debug(f"{call}: ignoring status {status.code} ({status.description})")

    def list_provinces(self) -> list[Province]:
        resp = self.provinces.list()
        check_status(resp.status)
        return list(resp.results)

    def get_province(self, province_id: str) -> Province:
        resp = self.provinces.get(province_id)
        check_status(resp.status)
        return resp.results

    def list_cities(self, province_id: str | None = None) -> list[City]:
        resp = self.cities.list(province_id)
        self._check_lenient(resp.status, "list_cities")
        return list(resp.results)

    def get_city(self, city_id: str, province_id: str | None = None) -> City:
        resp = self.cities.get(city_id, province_id)
        check_status(resp.status)
        return resp.results

    def list_subdistricts(self, city_id: str) -> list[Subdistrict]:
        resp = self.subdistricts.list(city_id)
        self._check_lenient(resp.status, "list_subdistricts")
        return list(resp.results)

    def get_subdistrict(self, city_id: str, subdistrict_id: str) -> Subdistrict:
        resp = self.subdistricts.get(city_id, subdistrict_id)
        self._check_lenient(resp.status, "get_subdistrict")
        return resp.results

    def get_cost_quote(
        self, origin: str, origin_type: str, destination: str, destination_type: str, weight: int, courier: str
    ) -> CostResponse:
        """Full quote: origin/destination details plus every carrier service returned."""
        resp = self.costs.quote(origin, origin_type, destination, destination_type, weight, courier)
        check_status(resp.status)
        return resp

    def get_cost(
        self, origin: str, origin_type: str, destination: str, destination_type: str, weight: int, courier: str
    ) -> list[Cost]:
        """Costs of the first carrier service in the quote."""
        resp = self.get_cost_quote(origin, origin_type, destination, destination_type, weight, courier)
        if not resp.results:
            raise EmptyResultError(f"no carrier service returned for courier {courier!r}")
        return list(resp.results[0].costs)
