"""Tests for nearby platform search via the stored procedure."""
import pytest

from tests.helpers import fake_session
from viennaflow.errors import GeometryDecodeError
from viennaflow.services.nearby import find_nearby_platforms, normalize_nearby_row


class _Row:
    def __init__(self, **values):
        self._mapping = values


def _row(steig_id: int, line_id, diva=None, location='{"type":"Point","coordinates":[16.37,48.21]}'):
    return _Row(steig_id=steig_id, fk_linien_id=line_id, haltestellen_diva=diva, location=location, distance=12.5)


class TestNormalizeNearbyRow:
    def test_location_text_is_parsed(self) -> None:
        item = normalize_nearby_row(_row(1, 301)._mapping)

        assert item["location"] == {"type": "Point", "coordinates": [16.37, 48.21]}

    def test_line_id_string_is_coerced(self) -> None:
        assert normalize_nearby_row(_row(1, "301")._mapping)["fk_linien_id"] == 301

    def test_non_numeric_line_id_becomes_none(self) -> None:
        assert normalize_nearby_row(_row(1, "U1")._mapping)["fk_linien_id"] is None

    def test_missing_diva_becomes_zero(self) -> None:
        assert normalize_nearby_row(_row(1, 301, diva=None)._mapping)["haltestellen_diva"] == 0

    def test_extra_columns_pass_through(self) -> None:
        assert normalize_nearby_row(_row(1, 301)._mapping)["distance"] == 12.5

    def test_unparsable_location_raises(self) -> None:
        with pytest.raises(GeometryDecodeError):
            normalize_nearby_row(_row(1, 301, location="{not json")._mapping)


class TestFindNearbyPlatforms:
    @pytest.mark.asyncio
    async def test_only_metro_lines_are_kept(self) -> None:
        db = fake_session(
            [_row(1, 301), _row(2, 5), _row(3, "304")],  # procedure rows
            [301, 304],  # metro line ids
        )

        items = await find_nearby_platforms(db, lat=48.21, lon=16.37, radius_m=500)

        assert [i["steig_id"] for i in items] == [1, 3]

    @pytest.mark.asyncio
    async def test_non_numeric_line_id_row_is_dropped(self) -> None:
        db = fake_session([_row(1, "U1"), _row(2, "301")], [301])

        items = await find_nearby_platforms(db, lat=48.21, lon=16.37, radius_m=500)

        assert [i["steig_id"] for i in items] == [2]

    @pytest.mark.asyncio
    async def test_calls_stored_procedure_with_parameters(self) -> None:
        db = fake_session([], [301])

        await find_nearby_platforms(db, lat=48.2, lon=16.3, radius_m=750)

        stmt = db.execute.await_args_list[0].args[0]
        assert "get_nearby_steige" in str(stmt)
        assert stmt.compile().params == {"lat": 48.2, "lon": 16.3, "radius": 750}

    @pytest.mark.asyncio
    async def test_no_metro_lines_returns_nothing(self) -> None:
        db = fake_session([_row(1, 301)], [])

        assert await find_nearby_platforms(db, lat=48.2, lon=16.3, radius_m=100) == []
