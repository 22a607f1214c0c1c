"""Assemble GeoJSON features from station / platform rows."""
from collections.abc import Iterable, Mapping, Sequence
from typing import Any

from viennaflow.models.platform import Platform
from viennaflow.models.station import Station
from viennaflow.services.geometry import decode_geometry


def feature_collection(features: list[dict[str, Any]]) -> dict[str, Any]:
    return {"type": "FeatureCollection", "features": features}


def assemble_station_features(
    station_ids: Sequence[int],
    stations: Iterable[Station],
    line_membership: Mapping[int, list[int]],
) -> list[dict[str, Any]]:
    """
    One feature per station, in station_ids order (not the database's order).
    Ids without a row are skipped, ids seen before are skipped, and a geometry that
    cannot be decoded raises GeometryDecodeError for the whole collection.
    """
    by_id = {s.haltestellen_id: s for s in stations}
    features = []
    emitted: set[int] = set()
    for station_id in station_ids:
        station = by_id.get(station_id)
        if station is None or station_id in emitted:
            continue
        emitted.add(station_id)
        features.append(
            {
                "type": "Feature",
                "geometry": decode_geometry(station.location),
                "properties": {
                    "haltestellen_id": station.haltestellen_id,
                    "diva": station.diva,
                    "name": station.name,
                    "linien_ids": list(line_membership.get(station_id, [])),
                },
            }
        )
    return features


def platform_feature(platform: Platform) -> dict[str, Any]:
    return {
        "type": "Feature",
        "geometry": decode_geometry(platform.location),
        "properties": {
            "steig_id": platform.steig_id,
            "fk_linien_id": platform.fk_linien_id,
            "fk_haltestellen_id": platform.fk_haltestellen_id,
            "richtung": platform.richtung,
            "reihenfolge": platform.reihenfolge,
            "rbl_nummer": platform.rbl_nummer,
            "bereich": platform.bereich,
            "steig": platform.steig,
        },
    }
