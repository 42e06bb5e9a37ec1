"""
RajaOngkir CLI: look up regions and shipping costs from the command line.

Usage examples:
  rajaongkir provinces
  rajaongkir subdistricts --city 39
  rajaongkir cost --origin 501 --destination 114 --weight 1700 --courier jne
  rajaongkir --json city --id 151
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from dataclasses import asdict
from typing import Any

from dotenv import load_dotenv

from rajaongkir.api.client import RajaOngkir
from rajaongkir.api.errors import RajaOngkirError
from rajaongkir.app.bootstrap import ConfigError, build_client, load_settings
from rajaongkir.data.models.city import City
from rajaongkir.data.models.cost import Cost
from rajaongkir.data.models.province import Province
from rajaongkir.data.models.subdistrict import Subdistrict

EXIT_OK = 0
EXIT_CONFIG = 1
EXIT_API = 2


def format_province(p: Province) -> str:
    return f"{p.province_id} {p.province}"


def format_city(c: City) -> str:
    return f"{c.city_id} {c.type} {c.city_name} ({c.province}) {c.postal_code}"


def format_subdistrict(s: Subdistrict) -> str:
    return f"{s.subdistrict_id} {s.subdistrict_name} - {s.type} {s.city} ({s.province})"


def format_cost(c: Cost) -> list[str]:
    lines = [f"{c.service} - {c.description}"]
    for v in c.cost:
        etd = f" etd {v.etd}" if v.etd else ""
        note = f" ({v.note})" if v.note else ""
        lines.append(f"    {v.value}{etd}{note}")
    return lines


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="rajaongkir", description="Query the RajaOngkir shipping API")
    parser.add_argument("--json", action="store_true", help="Print results as JSON")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    sub = parser.add_subparsers(dest="cmd", required=True)

    sub.add_parser("provinces", help="List all provinces")

    p_province = sub.add_parser("province", help="Show one province")
    p_province.add_argument("--id", required=True, help="Province ID")

    p_cities = sub.add_parser("cities", help="List cities")
    p_cities.add_argument("--province", help="Only cities in this province ID")

    p_city = sub.add_parser("city", help="Show one city")
    p_city.add_argument("--id", required=True, help="City ID")
    p_city.add_argument("--province", help="Province ID of the city")

    p_subs = sub.add_parser("subdistricts", help="List the subdistricts of a city")
    p_subs.add_argument("--city", required=True, help="City ID")

    p_subdistrict = sub.add_parser("subdistrict", help="Show one subdistrict")
    p_subdistrict.add_argument("--city", required=True, help="City ID")
    p_subdistrict.add_argument("--id", required=True, help="Subdistrict ID")

    p_cost = sub.add_parser("cost", help="Quote shipping costs for the first carrier service")
    p_cost.add_argument("--origin", required=True, help="Origin city or subdistrict ID")
    p_cost.add_argument("--origin-type", default="city", choices=["city", "subdistrict"])
    p_cost.add_argument("--destination", required=True, help="Destination city or subdistrict ID")
    p_cost.add_argument("--destination-type", default="city", choices=["city", "subdistrict"])
    p_cost.add_argument("--weight", type=int, required=True, help="Weight in grams")
    p_cost.add_argument("--courier", required=True, help="Courier code, e.g. jne")
    return parser


def _fetch(client: RajaOngkir, args: argparse.Namespace) -> Any:
    if args.cmd == "provinces":
        return client.list_provinces()
    if args.cmd == "province":
        return client.get_province(args.id)
    if args.cmd == "cities":
        return client.list_cities(args.province)
    if args.cmd == "city":
        return client.get_city(args.id, args.province)
    if args.cmd == "subdistricts":
        return client.list_subdistricts(args.city)
    if args.cmd == "subdistrict":
        return client.get_subdistrict(args.city, args.id)
    if args.cmd == "cost":
        return client.get_cost(
            args.origin, args.origin_type, args.destination, args.destination_type, args.weight, args.courier
        )
    raise ValueError(f"unknown command: {args.cmd}")


def _print_result(result: Any, as_json: bool) -> None:
    records = result if isinstance(result, list) else [result]
    if as_json:
        payload = [asdict(r) for r in records] if isinstance(result, list) else asdict(result)
        print(json.dumps(payload, indent=2))
        return
    for r in records:
        if isinstance(r, Province):
            print(format_province(r))
        elif isinstance(r, City):
            print(format_city(r))
        elif isinstance(r, Subdistrict):
            print(format_subdistrict(r))
        elif isinstance(r, Cost):
            for line in format_cost(r):
                print(line)


def run(client: RajaOngkir, args: argparse.Namespace) -> int:
    try:
        result = _fetch(client, args)
    except RajaOngkirError as e:
        logging.error(f"{args.cmd} failed: {e}")
        return EXIT_API
    _print_result(result, args.json)
    return EXIT_OK


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)

    load_dotenv()
    logging.basicConfig(level=logging.INFO, format="%(asctime)s - %(levelname)s - %(message)s")

    try:
        settings = load_settings()
    except ConfigError as e:
        logging.error(f"Error: {e}")
        return EXIT_CONFIG
    logging.getLogger().setLevel(logging.DEBUG if args.verbose else settings.log_level)

    with build_client(settings) as client:
        return run(client, args)


if __name__ == "__main__":
    sys.exit(main())
