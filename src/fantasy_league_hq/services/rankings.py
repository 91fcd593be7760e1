from collections.abc import Mapping

from fantasy_league_hq.domain.franchise import TeamMetadata
from fantasy_league_hq.domain.weekly import RankingCard, WeeklyContent


def ranking_movement(team: str, current: WeeklyContent, previous: WeeklyContent | None) -> int | None:
    """Places gained since the previous week; positive means the team moved up.

    ``None`` when there is no previous week or the team is missing from either week.
    """
    if previous is None:
        return None
    try:
        previous_index = previous.ranks.index(team)
        current_index = current.ranks.index(team)
    except ValueError:
        return None
    return previous_index - current_index


def ranking_cards(
    current: WeeklyContent,
    previous: WeeklyContent | None = None,
    metadata: Mapping[str, TeamMetadata] | None = None,
) -> list[RankingCard]:
    """Rank/blurb pairs for a week; extra ranks or blurbs beyond the shorter list are dropped."""
    metadata = metadata or {}
    cards: list[RankingCard] = []
    for i in range(current.entry_count):
        team = current.ranks[i]
        info = metadata.get(team)
        cards.append(
            RankingCard(
                rank=i + 1,
                team=team,
                blurb=current.blurbs[i],
                color=info.primary if info and info.primary else None,
                movement=ranking_movement(team, current, previous),
            )
        )
    return cards
