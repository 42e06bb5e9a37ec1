from dataclasses import dataclass
from typing import Any

from rajaongkir.data.models.fields import text


@dataclass(frozen=True)
class Province:
    province_id: str = ""
    province: str = ""

    @staticmethod
    def from_dict(d: dict[str, Any]) -> "Province":
        return Province(
            province_id=text(d, "province_id"),
            province=text(d, "province"),
        )
