from __future__ import annotations

from dataclasses import dataclass

from config import ConfigurationSet, config_from_dict, config_from_env, config_from_yaml

from fantasy_league_hq.services.colors import BRANDED_TEXT, PLACEHOLDER_COLOR, PLAIN_TEXT, TextPalette

_DEFAULTS: dict[str, object] = {
    "site": {
        "base_url": "",
        "data_dir": "",
        "timeout_seconds": 0,
    },
    "theme": {
        "dark_text": PLAIN_TEXT.dark,
        "light_text": PLAIN_TEXT.light,
        "branded_dark_text": BRANDED_TEXT.dark,
        "placeholder_color": PLACEHOLDER_COLOR,
    },
    "weekly": {
        "max_week": 18,
    },
}


@dataclass(frozen=True)
class SiteSettings:
    base_url: str = ""
    data_dir: str = ""
    timeout_seconds: float | None = None
    plain_text: TextPalette = PLAIN_TEXT
    branded_text: TextPalette = BRANDED_TEXT
    placeholder_color: str = PLACEHOLDER_COLOR
    max_week: int = 18


def create_config(
    yaml_path: str = "hq.yaml",
    env_prefix: str = "LEAGUE_HQ",
    defaults: dict[str, object] | None = None,
    *,
    overrides: dict[str, object] | None = None,
) -> ConfigurationSet:
    """Create a layered configuration.

    Priority (highest to lowest): explicit overrides > env vars > YAML file > defaults dict.
    """
    if defaults is None:
        defaults = _DEFAULTS

    layers = [
        config_from_env(env_prefix, separator="__", lowercase_keys=True),
        config_from_yaml(yaml_path, read_from_file=True, ignore_missing_paths=True),
        config_from_dict(defaults),
    ]
    if overrides:
        layers.insert(0, config_from_dict(overrides))
    return ConfigurationSet(*layers)


def load_site_settings(cfg: ConfigurationSet | None = None) -> SiteSettings:
    if cfg is None:
        cfg = create_config()
    timeout = float(str(cfg["site.timeout_seconds"]))
    return SiteSettings(
        base_url=str(cfg["site.base_url"]),
        data_dir=str(cfg["site.data_dir"]),
        timeout_seconds=timeout if timeout > 0 else None,
        plain_text=TextPalette(dark=str(cfg["theme.dark_text"]), light=str(cfg["theme.light_text"])),
        branded_text=TextPalette(dark=str(cfg["theme.branded_dark_text"]), light=str(cfg["theme.light_text"])),
        placeholder_color=str(cfg["theme.placeholder_color"]),
        max_week=int(str(cfg["weekly.max_week"])),
    )
