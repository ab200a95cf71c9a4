from __future__ import annotations

from datetime import datetime

AUTO = "auto"

# (month, day) each boundary falls on, at noon
_BOUNDARIES = [
    ((3, 20), "spring"),
    ((6, 21), "summer"),
    ((9, 22), "fall"),
    ((12, 21), "winter"),
]


def season_from_date(date: datetime) -> str:
    # the whole boundary day belongs to the new season
    noon = date.replace(hour=12, minute=0, second=0, microsecond=0)
    season = "winter"
    for (month, day), name in _BOUNDARIES:
        if noon >= noon.replace(month=month, day=day):
            season = name
    return season


def resolve_season(season: str, date: datetime) -> str:
    if season == AUTO:
        return season_from_date(date)
    return season
