"""
Cities API module for listing cities, optionally within a province.
"""
from typing import TYPE_CHECKING

from rajaongkir.data.models.envelope import CitiesResponse, CityResponse

if TYPE_CHECKING:
    from rajaongkir.api.client import RajaOngkir

CITY_ENDPOINT = "city"


class CitiesAPI:
    """City endpoints."""

    def __init__(self, client: "RajaOngkir"):
        self.client = client

    def list(self, province_id: str | None = None) -> CitiesResponse:
        """Fetch cities (GET /city), narrowed to one province when province_id is given."""
        params = {"province": province_id} if province_id is not None else None
        payload = self.client.http.get_json(CITY_ENDPOINT, self.client.api_key, params=params)
        return CitiesResponse.from_dict(payload)

    def get(self, city_id: str, province_id: str | None = None) -> CityResponse:
        """Fetch one city (GET /city?id={id})."""
        params: dict = {"id": city_id}
        if province_id is not None:
            params["province"] = province_id
        payload = self.client.http.get_json(CITY_ENDPOINT, self.client.api_key, params=params)
        return CityResponse.from_dict(payload)
