"""Shared fixtures: a small two-league site."""

import pytest

from fantasy_league_hq.session import LeagueSession
from tests.fakes.fetcher import FakeFetcher

FRANCHISES_CSV = """franchise_id,franchise_name,abbrev,owner_name,primary,secondary,tertiary,season,conference,font,description
1,Lakeshore Gulls,LSG,Ann,#1E90FF,#FFFFFF,#000000,2021,SCC,Pacifico,"Birds, mostly"
1,Lakeshore Gulls,LSG,Ann,#1E90FF,#FFFFFF,#000000,2022,SCC,Pacifico,"Birds, mostly"
1,Lakeshore Gulls,LSG,Ann,#1E90FF,#FFFFFF,#000000,2023,SCC,Pacifico,"Birds, mostly"
2,Cuyahoga Flames,CUY,Ben,#B22222,#FFD700,,2021,HCC,,"The ""Burning"" River"
2,Cuyahoga Flames,CUY,Ben,#8B0000,#FFD700,,2023,HCC,,"The ""Burning"" River"
3,Parma Pierogies,par,Cal,#FFFFFF,#228B22,#000000,2023,SCC,,
"""

SCHEDULE_CSV = """franchise_id,owner_name,opponent_id,season,week,game_type,is_intra_conf,result,result_char,franchise_score,opponent_score
1,Ann,2,2023,1,0,0,1,W,120.5,99.0
1,Ann,3,2023,2,0,1,0,L,88.0,101.5
1,Ann,2,2023,3,0,0,1,W,110.0,70.0
1,Ann,3,2023,14,-1,1,1,W,130.0,90.0
2,Ben,1,2023,1,0,0,0,L,99.0,120.5
2,Ben,1,2023,3,0,0,0,L,70.0,110.0
"""

STANDINGS_CSV = """"franchise_name","season","h2h_wins","h2h_losses","points_for","points_against","potential_points"
Lakeshore Gulls,2022,9,5,1500.5,1400,1700
Lakeshore Gulls,2023,10,4,1600,1350,1800
Cuyahoga Flames,2022,5,9,1300,1450,1500
Cuyahoga Flames,2023,4,10,1250,1500,1480
"""

SURVIVOR_CSV = """owner_name,season,weeks_alive
Ann,2023,7
Ben,2023,12
Cal,2023,3
Dee,2023,9
Ann,2022,4
"""

WEEK1_YML = """intro:
  title: Week 1 Power Rankings
  subtitle: Sixth City
  description: Here we go.
  season: 2023
  week: 1
ranks:
  - Lakeshore Gulls
  - Cuyahoga Flames
  - Parma Pierogies
blurbs:
  - Flying high.
  - Smouldering.
  - Boiled.
"""

WEEK2_YML = """intro:
  title: Week 2 Power Rankings
ranks:
  - Cuyahoga Flames
  - Lakeshore Gulls
  - Parma Pierogies
blurbs:
  - On fire.
  - Grounded.
"""

SITE: dict[str, str | bytes] = {
    "/data/sixth-city/api/fact_franchises.csv": FRANCHISES_CSV,
    "/data/sixth-city/api/v_fact_schedule.csv": SCHEDULE_CSV,
    "/data/sixth-city/api/standings.csv": STANDINGS_CSV,
    "/data/survivor/api/v_fact_standings.csv": SURVIVOR_CSV,
    "/data/sixth-city/content/week01.yml": WEEK1_YML,
    "/data/sixth-city/content/week02.yml": WEEK2_YML,
    "/data/sixth-city/ref/team_metadata.json": (
        '{"1": {"franchise_name": "Lakeshore Gulls", "primary": "#1E90FF"},'
        ' "2": {"franchise_name": "Cuyahoga Flames", "primary": "#8B0000"}}'
    ),
    "/assets/fonts/pacifico.woff": b"woff-bytes",
}


@pytest.fixture
def site_fetcher() -> FakeFetcher:
    return FakeFetcher(SITE)


@pytest.fixture
def session(site_fetcher: FakeFetcher) -> LeagueSession:
    return LeagueSession(site_fetcher)
