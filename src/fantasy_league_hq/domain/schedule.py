from dataclasses import dataclass
from enum import Enum

REGULAR_SEASON = 0


class AggregationKey(Enum):
    FRANCHISE_ID = "franchise_id"
    OWNER_NAME = "owner_name"


@dataclass(frozen=True)
class ScheduleGame:
    franchise_id: str
    opponent_id: str
    season: int
    week: int
    game_type: int
    result: int
    result_char: str
    franchise_score: float
    opponent_score: float
    is_intra_conf: bool = False
    owner_name: str = ""


@dataclass(frozen=True)
class WinLossRecord:
    wins: int
    losses: int
    ties: int = 0

    @property
    def games(self) -> int:
        return self.wins + self.losses + self.ties

    def __str__(self) -> str:
        if self.ties:
            return f"{self.wins}-{self.losses}-{self.ties}"
        return f"{self.wins}-{self.losses}"


@dataclass(frozen=True)
class ScoreSummary:
    average: float
    minimum: float
    maximum: float


@dataclass(frozen=True)
class FranchiseStats:
    record: WinLossRecord
    win_pct: float
    loss_pct: float
    conference_record: WinLossRecord
    conference_win_pct: float
    points_for: ScoreSummary
    points_against: ScoreSummary
