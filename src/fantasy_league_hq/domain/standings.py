from dataclasses import dataclass


@dataclass(frozen=True)
class StandingsEntry:
    franchise_name: str
    season: int
    h2h_wins: float = 0.0
    h2h_losses: float = 0.0
    points_for: float = 0.0
    points_against: float = 0.0
    potential_points: float = 0.0
    franchise_id: str = ""


@dataclass(frozen=True)
class RollupEntry:
    franchise_name: str
    h2h_wins: float
    h2h_losses: float
    points_for: float
    points_against: float
    potential_points: float
    h2h_winpct: float


@dataclass(frozen=True)
class SurvivorEntry:
    owner_name: str
    season: int
    weeks_alive: int


@dataclass(frozen=True)
class SurvivorPlacement:
    place: int
    label: str
    owner_name: str
    weeks_alive: int

    @property
    def is_podium(self) -> bool:
        return self.place <= 3


@dataclass(frozen=True)
class SurvivorSeason:
    season: int
    placements: list[SurvivorPlacement]


@dataclass(frozen=True)
class RecordBook:
    seasons: list[int]
    selected: frozenset[int]
    label: str
    rows: list[RollupEntry]
