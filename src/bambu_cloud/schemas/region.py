from enum import Enum


class Region(str, Enum):
    """Cloud deployment zone. Only China is served from separate hosts."""

    China = "China"
    Europe = "Europe"
    NorthAmerica = "NorthAmerica"
    AsiaPacific = "AsiaPacific"
    Other = "Other"

    def is_china(self) -> bool:
        return self is Region.China

    @classmethod
    def parse(cls, value: str) -> "Region":
        """Case-insensitive lookup by name; 'north_america' and 'asia-pacific' also work."""
        key = value.strip().replace("_", "").replace("-", "").replace(" ", "").lower()
        for region in cls:
            if region.name.lower() == key:
                return region
        raise ValueError(f"Unknown region '{value}', expected one of {[r.name for r in cls]}")
