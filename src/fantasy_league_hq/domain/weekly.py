from dataclasses import dataclass, field

from fantasy_league_hq.domain.franchise import TeamMetadata
from fantasy_league_hq.domain.league import League


@dataclass(frozen=True)
class WeeklyIntro:
    title: str = ""
    subtitle: str = ""
    description: str = ""
    season: int | None = None
    week: int | None = None


@dataclass(frozen=True)
class WeeklyContent:
    """A week's power rankings; ``ranks[0]`` is the best team and ``blurbs`` aligns by index."""

    intro: WeeklyIntro | None = None
    ranks: tuple[str, ...] = ()
    blurbs: tuple[str, ...] = ()

    @property
    def entry_count(self) -> int:
        return min(len(self.ranks), len(self.blurbs))


@dataclass(frozen=True)
class RankingCard:
    rank: int
    team: str
    blurb: str
    color: str | None = None
    movement: int | None = None


@dataclass(frozen=True)
class LeagueWeek:
    league: League
    week: int
    content: WeeklyContent | None
    cards: list[RankingCard] = field(default_factory=list)
    metadata: dict[str, TeamMetadata] = field(default_factory=dict)
