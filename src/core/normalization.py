from __future__ import annotations

from typing import Any, Dict, Mapping, Optional

from core.exceptions import PayloadFormatError
from core.logging import get_logger
from core.models import CompactFixture, CompactFixtureList

logger = get_logger("core.normalization")


def _venue_name(fixture: Mapping[str, Any]) -> Optional[str]:
    venue = fixture.get("venue") or {}
    if not isinstance(venue, Mapping):
        return None
    return venue.get("name") or None


def _section(parent: Mapping[str, Any], key: str) -> Mapping[str, Any]:
    value = parent[key]
    if not isinstance(value, Mapping):
        raise TypeError(f"'{key}' non è un oggetto")
    return value


def normalize_fixture(item: Dict[str, Any]) -> CompactFixture:
    """
    Proiezione compatta di un record grezzo API-Football.

    I sotto-oggetti (fixture, fixture.status, league, teams, teams.home,
    teams.away) sono obbligatori: se mancano solleva KeyError/TypeError.
    I campi foglia mancanti diventano None.
    """
    if not isinstance(item, Mapping):
        raise TypeError("record non è un oggetto")
    fixture = _section(item, "fixture")
    status = _section(fixture, "status")
    league = _section(item, "league")
    teams = _section(item, "teams")
    home = _section(teams, "home")
    away = _section(teams, "away")

    return {
        "fixture_id": fixture.get("id"),
        "date": fixture.get("date"),
        "timestamp": fixture.get("timestamp"),
        "league_id": league.get("id"),
        "league_name": league.get("name"),
        "home_team": home.get("name"),
        "away_team": away.get("name"),
        "home_team_id": home.get("id"),
        "away_team_id": away.get("id"),
        "venue": _venue_name(fixture),
        "status": status.get("short"),
    }


def normalize_fixtures(raw: Any) -> CompactFixtureList:
    """
    Normalizza l'array 'response' del payload /fixtures.

    1:1 rispetto all'input: stesso ordine, nessun filtro, nessuna dedup.
    Solleva PayloadFormatError se 'response' manca o un record non ha
    i sotto-oggetti obbligatori.
    """
    if not isinstance(raw, Mapping):
        raise PayloadFormatError("Payload upstream non è un oggetto JSON")
    response = raw.get("response")
    if not isinstance(response, list):
        raise PayloadFormatError("Formato inatteso: 'response' non è una lista")

    out: CompactFixtureList = []
    for idx, item in enumerate(response):
        try:
            out.append(normalize_fixture(item))
        except (KeyError, TypeError) as exc:
            logger.warning("Record fixture non valido index=%s: %r", idx, exc)
            raise PayloadFormatError(f"Record fixture non valido (index={idx}): {exc!r}") from exc
    return out


__all__ = ["normalize_fixture", "normalize_fixtures"]
