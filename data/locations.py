"""
Location Registry for CharSense
Static catalog of monitored sensor sites
"""

from typing import List, Optional

from api.schemas import Location, LocationType

# Sensor sites across Hyderabad, in registry order
SENSOR_LOCATIONS = [
    {"id": "charsense_001", "lat": 17.385044, "lng": 78.486671, "name": "Hyderabad Central", "type": "highway"},
    {"id": "charsense_002", "lat": 17.402760, "lng": 78.474578, "name": "Banjara Hills", "type": "residential"},
    {"id": "charsense_003", "lat": 17.360589, "lng": 78.478890, "name": "Industrial Area", "type": "industrial"},
    {"id": "charsense_004", "lat": 17.425288, "lng": 78.450549, "name": "Jubilee Hills", "type": "residential"},
    {"id": "charsense_005", "lat": 17.373819, "lng": 78.500671, "name": "KBR Park", "type": "park"},
    {"id": "charsense_006", "lat": 17.453285, "lng": 78.384997, "name": "Airport Road", "type": "highway"},
    {"id": "charsense_007", "lat": 17.396454, "lng": 78.520654, "name": "Secunderabad", "type": "residential"},
    {"id": "charsense_008", "lat": 17.342534, "lng": 78.455213, "name": "Gachibowli", "type": "residential"},
]


class LocationRegistry:
    """
    Read-only lookup over the configured sensor sites

    Locations are built once and never mutated.
    """

    def __init__(self, entries: Optional[List[dict]] = None):
        entries = SENSOR_LOCATIONS if entries is None else entries
        self._locations = tuple(
            Location(
                id=entry["id"],
                name=entry["name"],
                lat=entry["lat"],
                lng=entry["lng"],
                type=LocationType(entry["type"]),
            )
            for entry in entries
        )
        self._by_id = {location.id: location for location in self._locations}

    def all(self) -> List[Location]:
        """All locations in registry order"""
        return list(self._locations)

    def get(self, device_id: str) -> Optional[Location]:
        """Location for a device id, or None when not registered"""
        return self._by_id.get(device_id)

    def __contains__(self, device_id: str) -> bool:
        return device_id in self._by_id

    def __len__(self) -> int:
        return len(self._locations)


# Process-wide registry
registry = LocationRegistry()
