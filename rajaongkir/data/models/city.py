from dataclasses import dataclass
from typing import Any

from rajaongkir.data.models.fields import text


@dataclass(frozen=True)
class City:
    city_id: str = ""
    province_id: str = ""
    province: str = ""
    type: str = ""
    city_name: str = ""
    postal_code: str = ""

    @staticmethod
    def from_dict(d: dict[str, Any]) -> "City":
        return City(
            city_id=text(d, "city_id"),
            province_id=text(d, "province_id"),
            province=text(d, "province"),
            type=text(d, "type"),
            city_name=text(d, "city_name"),
            postal_code=text(d, "postal_code"),
        )
