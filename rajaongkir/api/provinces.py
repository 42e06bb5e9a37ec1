"""
Provinces API module for listing provinces and looking one up by ID.
"""
from typing import TYPE_CHECKING

from rajaongkir.data.models.envelope import ProvinceResponse, ProvincesResponse

if TYPE_CHECKING:
    from rajaongkir.api.client import RajaOngkir

PROVINCE_ENDPOINT = "province"


class ProvincesAPI:
    """Province endpoints."""

    def __init__(self, client: "RajaOngkir"):
        self.client = client

    def list(self) -> ProvincesResponse:
        """Fetch all provinces (GET /province)."""
        payload = self.client.http.get_json(PROVINCE_ENDPOINT, self.client.api_key)
        return ProvincesResponse.from_dict(payload)

    def get(self, province_id: str) -> ProvinceResponse:
        """Fetch one province (GET /province?id={id})."""
        payload = self.client.http.get_json(PROVINCE_ENDPOINT, self.client.api_key, params={"id": province_id})
        return ProvinceResponse.from_dict(payload)
