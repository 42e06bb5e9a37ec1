from dataclasses import dataclass
from typing import Any

from rajaongkir.data.models.fields import text


@dataclass(frozen=True)
class Subdistrict:
    subdistrict_id: str = ""
    province_id: str = ""
    province: str = ""
    city_id: str = ""
    # the API names the city field "city" here, unlike the city_name of /city
    city: str = ""
    type: str = ""
    subdistrict_name: str = ""

    @staticmethod
    def from_dict(d: dict[str, Any]) -> "Subdistrict":
        return Subdistrict(
            subdistrict_id=text(d, "subdistrict_id"),
            province_id=text(d, "province_id"),
            province=text(d, "province"),
            city_id=text(d, "city_id"),
            city=text(d, "city"),
            type=text(d, "type"),
            subdistrict_name=text(d, "subdistrict_name"),
        )
