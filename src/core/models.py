from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, List, Optional, TypedDict


class CompactFixture(TypedDict):
    # campi foglia None se assenti nel record upstream
    fixture_id: Optional[int]
    date: Optional[str]                # ISO 8601
    timestamp: Optional[int]           # epoch seconds
    league_id: Optional[int]
    league_name: Optional[str]
    home_team: Optional[str]
    away_team: Optional[str]
    home_team_id: Optional[int]
    away_team_id: Optional[int]
    venue: Optional[str]
    status: Optional[str]              # NS, FT, ...


CompactFixtureList = List[CompactFixture]


def _present(value: Optional[str]) -> Optional[str]:
    # solo la stringa vuota vale come assente; gli altri valori passano invariati
    return value or None


@dataclass(frozen=True)
class FixtureQuery:
    """Filtro fixtures costruito per singola richiesta e poi scartato."""

    date: Optional[str] = None
    league: Optional[str] = None
    season: Optional[str] = None
    team: Optional[str] = None

    @classmethod
    def from_request(
        cls,
        date: Optional[str] = None,
        league: Optional[str] = None,
        season: Optional[str] = None,
        team: Optional[str] = None,
    ) -> "FixtureQuery":
        return cls(
            date=_present(date),
            league=_present(league),
            season=_present(season),
            team=_present(team),
        )

    @property
    def has_scope(self) -> bool:
        """True se la richiesta è ristretta a una lega o a una squadra."""
        return bool(self.league or self.team)

    def to_params(self) -> Dict[str, str]:
        params: Dict[str, str] = {}
        if self.date:
            params["date"] = self.date
        if self.league:
            params["league"] = self.league
        if self.season:
            params["season"] = self.season
        if self.team:
            params["team"] = self.team
        return params


__all__ = ["CompactFixture", "CompactFixtureList", "FixtureQuery"]
