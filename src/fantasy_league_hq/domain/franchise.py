from dataclasses import dataclass

DEFAULT_FONT = "Bungee"


@dataclass(frozen=True)
class FranchiseSnapshot:
    """One franchise as it stood in one season."""

    franchise_id: str
    franchise_name: str
    abbrev: str
    owner_name: str
    primary: str
    secondary: str
    tertiary: str
    season: int
    conference: str = ""
    font: str = ""
    description: str = ""

    @property
    def identity(self) -> tuple[str, str, str, str, str, str, str]:
        return (
            self.franchise_id,
            self.franchise_name,
            self.abbrev,
            self.owner_name,
            self.primary,
            self.secondary,
            self.tertiary,
        )

    @property
    def display_font(self) -> str:
        return self.font or DEFAULT_FONT


@dataclass(frozen=True)
class FranchiseColors:
    """A franchise's color set as introduced (earliest season carrying it)."""

    franchise_id: str
    franchise_name: str
    abbrev: str
    owner_name: str
    primary: str
    secondary: str
    tertiary: str
    season: int

    @property
    def team_select(self) -> str:
        return f"{self.abbrev} ({self.season})"


@dataclass(frozen=True)
class TeamMetadata:
    franchise_name: str
    primary: str
    secondary: str = ""
    tertiary: str = ""
    abbrev: str = ""
    conference: str = ""
    font: str = ""
    season: int | None = None


@dataclass(frozen=True)
class FranchiseDirectory:
    season: int
    conferences: dict[str, list[FranchiseSnapshot]]


@dataclass(frozen=True)
class FontFace:
    name: str
    path: str
    data: bytes


@dataclass(frozen=True)
class FranchisePage:
    abbrev: str
    franchise: FranchiseSnapshot | None
    font: FontFace | None = None

    @property
    def found(self) -> bool:
        return self.franchise is not None
