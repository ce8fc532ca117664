#Purpose: Travel mode -> provider profile lookup tables.
#One table per provider, one entry per TravelMode.
#Unknown modes fall back to the cycling profile of that provider.

from typing import Dict

from .models import TravelMode

OPENROUTESERVICE_PROFILES: Dict[TravelMode, str] = {
    TravelMode.CYCLING: "cycling-regular",
    TravelMode.WALKING: "foot-walking",
    TravelMode.DRIVING: "driving-car",
}

OSRM_PROFILES: Dict[TravelMode, str] = {
    TravelMode.CYCLING: "cycling",
    TravelMode.WALKING: "walking",
    TravelMode.DRIVING: "driving",
}


def openrouteservice_profile(mode) -> str:
    return OPENROUTESERVICE_PROFILES.get(mode, OPENROUTESERVICE_PROFILES[TravelMode.CYCLING])


def osrm_profile(mode) -> str:
    return OSRM_PROFILES.get(mode, OSRM_PROFILES[TravelMode.CYCLING])
