import json

import pytest

from shared.core.exceptions import CatalogIntegrityError
from timezone_service.services.offset_resolver import is_valid_zone
from world_clock_service.data.catalog import load_catalog
from tests.utils.fakes import CityFactory


class TestCityCatalog:
    """Test cases for loading and validating the city catalog."""

    def test_bundled_catalog(self):
        cities = load_catalog()

        ids = [city.city_id for city in cities]
        assert len(ids) == len(set(ids))
        assert {"tokyo", "new-york", "london", "mumbai"} <= set(ids)
        assert all(is_valid_zone(city.zone_id) for city in cities)

    def test_load_from_file(self, tmp_path):
        path = tmp_path / "cities.json"
        path.write_text(
            json.dumps([CityFactory.create_city_data()]), encoding="utf-8"
        )

        cities = load_catalog(str(path))

        assert [city.city_id for city in cities] == ["tokyo"]
        assert cities[0].zone_id == "Asia/Tokyo"

    def test_missing_zone_id(self, tmp_path):
        entry = CityFactory.create_city_data()
        del entry["zone_id"]
        path = tmp_path / "cities.json"
        path.write_text(json.dumps([entry]), encoding="utf-8")

        with pytest.raises(CatalogIntegrityError) as exc_info:
            load_catalog(str(path))
        assert exc_info.value.details["entry"] == 0

    def test_empty_zone_id(self, tmp_path):
        path = tmp_path / "cities.json"
        path.write_text(
            json.dumps([CityFactory.create_city_data(zone_id="")]),
            encoding="utf-8",
        )
        with pytest.raises(CatalogIntegrityError):
            load_catalog(str(path))

    def test_duplicate_ids(self, tmp_path):
        path = tmp_path / "cities.json"
        path.write_text(
            json.dumps(
                [CityFactory.create_city_data(), CityFactory.create_city_data()]
            ),
            encoding="utf-8",
        )
        with pytest.raises(CatalogIntegrityError) as exc_info:
            load_catalog(str(path))
        assert exc_info.value.details == {"city_id": "tokyo"}

    def test_not_a_list(self, tmp_path):
        path = tmp_path / "cities.json"
        path.write_text(json.dumps({"tokyo": {}}), encoding="utf-8")
        with pytest.raises(CatalogIntegrityError):
            load_catalog(str(path))

    def test_unreadable_file(self, tmp_path):
        with pytest.raises(CatalogIntegrityError):
            load_catalog(str(tmp_path / "missing.json"))
