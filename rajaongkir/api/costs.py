"""
Costs API module for shipping rate quotes.
"""
from typing import TYPE_CHECKING
from urllib.parse import urlencode

from rajaongkir.data.models.envelope import CostResponse

if TYPE_CHECKING:
    from rajaongkir.api.client import RajaOngkir

COST_ENDPOINT = "cost"


def encode_cost_query(
    origin: str, origin_type: str, destination: str, destination_type: str, weight: int, courier: str
) -> str:
    """Form body for POST /cost, always in this field order.

    ":" is left literal so multi-courier codes such as "jne:pos" go out as given.
    """
    return urlencode(
        [
            ("origin", origin),
            ("originType", origin_type),
            ("destination", destination),
            ("destinationType", destination_type),
            ("weight", weight),
            ("courier", courier),
        ],
        safe=":",
    )


class CostsAPI:
    """Cost endpoints."""

    def __init__(self, client: "RajaOngkir"):
        self.client = client

    def quote(
        self, origin: str, origin_type: str, destination: str, destination_type: str, weight: int, courier: str
    ) -> CostResponse:
        """Request a shipping quote (POST /cost). weight is in grams; courier is a code such as "jne"."""
        body = encode_cost_query(origin, origin_type, destination, destination_type, weight, courier)
        payload = self.client.http.post_form(COST_ENDPOINT, self.client.api_key, body)
        return CostResponse.from_dict(payload)
