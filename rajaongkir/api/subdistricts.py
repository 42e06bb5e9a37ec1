from typing import TYPE_CHECKING

from rajaongkir.data.models.envelope import SubdistrictResponse, SubdistrictsResponse

if TYPE_CHECKING:
    from rajaongkir.api.client import RajaOngkir

SUBDISTRICT_ENDPOINT = "subdistrict"


class SubdistrictsAPI:
    """Subdistrict endpoints."""

    def __init__(self, client: "RajaOngkir"):
        self.client = client

    def list(self, city_id: str) -> SubdistrictsResponse:
        """Fetch the subdistricts of a city (GET /subdistrict?city={cityID})."""
        payload = self.client.http.get_json(SUBDISTRICT_ENDPOINT, self.client.api_key, params={"city": city_id})
        return SubdistrictsResponse.from_dict(payload)

    def get(self, city_id: str, subdistrict_id: str) -> SubdistrictResponse:
        """Fetch one subdistrict (GET /subdistrict?city={cityID}&id={subdistrictID})."""
        params = {"city": city_id, "id": subdistrict_id}
        payload = self.client.http.get_json(SUBDISTRICT_ENDPOINT, self.client.api_key, params=params)
        return SubdistrictResponse.from_dict(payload)
