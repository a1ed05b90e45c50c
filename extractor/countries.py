from __future__ import annotations

from types import MappingProxyType

# Spellings used in the report's tables, mapped to the name both tables share.
# " Trinidad and Tobago" keeps its leading space: the joined keys depend on it.
COUNTRY_ALIASES = MappingProxyType({
    "Bosnia": "Bosnia and Herzegovina",
    "Bosnia Herzegovina": "Bosnia and Herzegovina",
    "CAR": "Central African Republic",
    "North. Cyprus": "Northern Cyprus",
    "Nagorno Karabakh": "Nagorno-Karabash",
    "Gambia": "The Gambia",
    "Trinidad &Tobago": " Trinidad and Tobago",
    "Trinidad & Tobago": " Trinidad and Tobago",
    "UAEs": "UAE",
})


def normalize_country(name: str) -> str:
    return COUNTRY_ALIASES.get(name, name)
