from __future__ import annotations

import json
from dataclasses import dataclass
from pathlib import Path

try:
    import tomllib as toml
except ImportError:
    import tomli as toml

import yaml

from .errors import InvalidConfig

DEFAULT_CONFIG = "entrylog.toml"
DEFAULT_FONTS_URL = (
    "https://fonts.googleapis.com/css2?family=Inter:wght@400;500;600"
    "&family=Libre+Baskerville&display=swap"
)


def load_config(path: Path) -> dict:
    if not path.exists():
        return {}
    suffix = path.suffix.lower()
    try:
        text = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise InvalidConfig(path, str(exc)) from exc
    if suffix == ".toml":
        try:
            data = toml.loads(text)
        except toml.TOMLDecodeError as exc:
            raise InvalidConfig(path, str(exc)) from exc
    elif suffix in {".yml", ".yaml"}:
        try:
            data = yaml.safe_load(text)
        except yaml.YAMLError as exc:
            raise InvalidConfig(path, str(exc)) from exc
        if data is None:
            return {}
    else:
        try:
            data = json.loads(text)
        except json.JSONDecodeError as exc:
            raise InvalidConfig(path, str(exc)) from exc
    if not isinstance(data, dict):
        raise InvalidConfig(path, "config must be a mapping")
    return data


@dataclass(frozen=True)
class SiteConfig:
    log_dir: Path = Path("log")
    log_url: str = "/log/"
    site_name: str = "finishingthingz"
    site_url: str = "/"
    back_url: str = "/#log"
    stylesheet: str = "/style.css"
    fonts_url: str = DEFAULT_FONTS_URL
    template: str = ""

    @property
    def index_path(self) -> Path:
        return self.log_dir / "entries.json"

    def entry_dir(self, slug: str) -> Path:
        return self.log_dir / slug

    def entry_page(self, slug: str) -> Path:
        return self.entry_dir(slug) / "index.html"

    def entry_url(self, slug: str) -> str:
        return f"{self.log_url.rstrip('/')}/{slug}/"


def resolve_site(args: object, config: dict, config_path: Path) -> SiteConfig:
    """Merge command-line options over config-file values over defaults.

    Relative paths set in the config file are taken from the config file's
    directory; those given on the command line from the working directory.
    """
    defaults = SiteConfig()

    def pick(key: str, default: str) -> tuple[str, bool]:
        value = getattr(args, key, None)
        if value:
            return str(value), False
        value = config.get(key)
        if value is None:
            return default, False
        return str(value), True

    def path_value(key: str, default: str) -> str:
        value, from_file = pick(key, default)
        if value and from_file and not Path(value).is_absolute():
            return str(config_path.parent / value)
        return value

    log_dir = path_value("log_dir", str(defaults.log_dir))
    return SiteConfig(
        log_dir=Path(log_dir),
        log_url=pick("log_url", defaults.log_url)[0],
        site_name=pick("site_name", defaults.site_name)[0],
        site_url=pick("site_url", defaults.site_url)[0],
        back_url=pick("back_url", defaults.back_url)[0],
        stylesheet=pick("stylesheet", defaults.stylesheet)[0],
        fonts_url=pick("fonts_url", defaults.fonts_url)[0],
        template=path_value("template", defaults.template),
    )
