import json
from pathlib import Path
from typing import Any, Dict, List, Optional

from pydantic import ValidationError

from shared.core.exceptions import CatalogIntegrityError
from world_clock_service.schemas.city import City

# fmt: off
CITY_CATALOG: List[Dict[str, Any]] = [
    {"city_id": "beijing", "name": "北京", "english_name": "Beijing", "country": "China", "zone_id": "Asia/Shanghai", "latitude": 39.9042, "longitude": 116.4074},
    {"city_id": "shanghai", "name": "上海", "english_name": "Shanghai", "country": "China", "zone_id": "Asia/Shanghai", "latitude": 31.2304, "longitude": 121.4737},
    {"city_id": "hong-kong", "name": "香港", "english_name": "Hong Kong", "country": "China", "zone_id": "Asia/Hong_Kong", "latitude": 22.3193, "longitude": 114.1694},
    {"city_id": "taipei", "name": "臺北", "english_name": "Taipei", "country": "Taiwan", "zone_id": "Asia/Taipei", "latitude": 25.033, "longitude": 121.5654},
    {"city_id": "tokyo", "name": "東京", "english_name": "Tokyo", "country": "Japan", "zone_id": "Asia/Tokyo", "latitude": 35.6762, "longitude": 139.6503},
    {"city_id": "seoul", "name": "서울", "english_name": "Seoul", "country": "South Korea", "zone_id": "Asia/Seoul", "latitude": 37.5665, "longitude": 126.978},
    {"city_id": "singapore", "name": "Singapore", "english_name": "Singapore", "country": "Singapore", "zone_id": "Asia/Singapore", "latitude": 1.3521, "longitude": 103.8198},
    {"city_id": "bangkok", "name": "กรุงเทพมหานคร", "english_name": "Bangkok", "country": "Thailand", "zone_id": "Asia/Bangkok", "latitude": 13.7563, "longitude": 100.5018},
    {"city_id": "mumbai", "name": "मुंबई", "english_name": "Mumbai", "country": "India", "zone_id": "Asia/Kolkata", "latitude": 19.076, "longitude": 72.8777},
    {"city_id": "kathmandu", "name": "काठमाडौं", "english_name": "Kathmandu", "country": "Nepal", "zone_id": "Asia/Kathmandu", "latitude": 27.7172, "longitude": 85.324},
    {"city_id": "dubai", "name": "دبي", "english_name": "Dubai", "country": "United Arab Emirates", "zone_id": "Asia/Dubai", "latitude": 25.2048, "longitude": 55.2708},
    {"city_id": "tehran", "name": "تهران", "english_name": "Tehran", "country": "Iran", "zone_id": "Asia/Tehran", "latitude": 35.6892, "longitude": 51.389},
    {"city_id": "moscow", "name": "Москва", "english_name": "Moscow", "country": "Russia", "zone_id": "Europe/Moscow", "latitude": 55.7558, "longitude": 37.6173},
    {"city_id": "istanbul", "name": "İstanbul", "english_name": "Istanbul", "country": "Turkey", "zone_id": "Europe/Istanbul", "latitude": 41.0082, "longitude": 28.9784},
    {"city_id": "cairo", "name": "القاهرة", "english_name": "Cairo", "country": "Egypt", "zone_id": "Africa/Cairo", "latitude": 30.0444, "longitude": 31.2357},
    {"city_id": "johannesburg", "name": "Johannesburg", "english_name": "Johannesburg", "country": "South Africa", "zone_id": "Africa/Johannesburg", "latitude": -26.2041, "longitude": 28.0473},
    {"city_id": "berlin", "name": "Berlin", "english_name": "Berlin", "country": "Germany", "zone_id": "Europe/Berlin", "latitude": 52.52, "longitude": 13.405},
    {"city_id": "paris", "name": "Paris", "english_name": "Paris", "country": "France", "zone_id": "Europe/Paris", "latitude": 48.8566, "longitude": 2.3522},
    {"city_id": "london", "name": "London", "english_name": "London", "country": "United Kingdom", "zone_id": "Europe/London", "latitude": 51.5074, "longitude": -0.1278},
    {"city_id": "reykjavik", "name": "Reykjavík", "english_name": "Reykjavik", "country": "Iceland", "zone_id": "Atlantic/Reykjavik", "latitude": 64.1466, "longitude": -21.9426},
    {"city_id": "sao-paulo", "name": "São Paulo", "english_name": "Sao Paulo", "country": "Brazil", "zone_id": "America/Sao_Paulo", "latitude": -23.5505, "longitude": -46.6333},
    {"city_id": "st-johns", "name": "St. John's", "english_name": "St. John's", "country": "Canada", "zone_id": "America/St_Johns", "latitude": 47.5615, "longitude": -52.7126},
    {"city_id": "new-york", "name": "New York", "english_name": "New York", "country": "United States", "zone_id": "America/New_York", "latitude": 40.7128, "longitude": -74.006},
    {"city_id": "chicago", "name": "Chicago", "english_name": "Chicago", "country": "United States", "zone_id": "America/Chicago", "latitude": 41.8781, "longitude": -87.6298},
    {"city_id": "mexico-city", "name": "Ciudad de México", "english_name": "Mexico City", "country": "Mexico", "zone_id": "America/Mexico_City", "latitude": 19.4326, "longitude": -99.1332},
    {"city_id": "denver", "name": "Denver", "english_name": "Denver", "country": "United States", "zone_id": "America/Denver", "latitude": 39.7392, "longitude": -104.9903},
    {"city_id": "los-angeles", "name": "Los Angeles", "english_name": "Los Angeles", "country": "United States", "zone_id": "America/Los_Angeles", "latitude": 34.0522, "longitude": -118.2437},
    {"city_id": "anchorage", "name": "Anchorage", "english_name": "Anchorage", "country": "United States", "zone_id": "America/Anchorage", "latitude": 61.2181, "longitude": -149.9003},
    {"city_id": "honolulu", "name": "Honolulu", "english_name": "Honolulu", "country": "United States", "zone_id": "Pacific/Honolulu", "latitude": 21.3069, "longitude": -157.8583},
    {"city_id": "sydney", "name": "Sydney", "english_name": "Sydney", "country": "Australia", "zone_id": "Australia/Sydney", "latitude": -33.8688, "longitude": 151.2093},
    {"city_id": "auckland", "name": "Auckland", "english_name": "Auckland", "country": "New Zealand", "zone_id": "Pacific/Auckland", "latitude": -36.8485, "longitude": 174.7633},
    {"city_id": "kiritimati", "name": "Kiritimati", "english_name": "Kiritimati", "country": "Kiribati", "zone_id": "Pacific/Kiritimati", "latitude": 1.8721, "longitude": -157.4278},
]
# fmt: on


def _validate(entries: List[Dict[str, Any]]) -> List[City]:
    cities: List[City] = []
    seen: set[str] = set()
    for index, entry in enumerate(entries):
        try:
            city = City.model_validate(entry)
        except ValidationError as e:
            raise CatalogIntegrityError(
                f"Catalog entry {index} is invalid",
                details={
                    "entry": index,
                    "errors": [error["msg"] for error in e.errors()],
                },
            ) from e
        if city.city_id in seen:
            raise CatalogIntegrityError(
                f"Duplicate city id {city.city_id!r}",
                details={"city_id": city.city_id},
            )
        seen.add(city.city_id)
        cities.append(city)
    return cities


def load_catalog(path: Optional[str] = None) -> List[City]:
    """
    The bundled catalog, or a JSON list of city objects from ``path``.

    Raises CatalogIntegrityError for missing fields (a city without a zone
    id included), unreadable files and duplicate ids.
    """
    if path is None:
        return _validate(CITY_CATALOG)

    try:
        entries = json.loads(Path(path).read_text(encoding="utf-8"))
    except (OSError, json.JSONDecodeError) as e:
        raise CatalogIntegrityError(
            f"Unable to read city catalog {path}", details={"path": path}
        ) from e
    if not isinstance(entries, list):
        raise CatalogIntegrityError(
            "City catalog must be a JSON list", details={"path": path}
        )
    return _validate(entries)
