import logging
import sys
from pathlib import Path
from typing import Any, Optional

from .constants import API_PREFIX
from .enums import ConfigFormat

DEF_DBFILE = Path().home() / "timesheet.db"


class Config:
    db_file: Path = DEF_DBFILE
    db_url: Optional[str] = None
    host: str = "127.0.0.1"
    port: int = 8080
    api_prefix: str = API_PREFIX
    cors_origins: list[str] = []
    echo_sql: bool = False
    debug: bool = False

    def __init__(self, config_file: Optional[Path] = None, **kwargs: Any) -> None:
        # per-instance copy so the class default list is never shared
        self.cors_origins = list(self.cors_origins)
        if config_file:
            self.from_file(config_file)

        if kwargs:
            self.update(**kwargs)

    @property
    def database_url(self) -> str:
        if self.db_url:
            return self.db_url
        return f"sqlite:///{self.db_file}"

    def from_file(self, config_file: Path, strict: bool = False) -> None:
        config_file = Path(config_file)
        if not config_file.exists():
            err = OSError(f"Specified config file {config_file} does not exist")
            if strict:
                raise err
            else:
                logging.warning(f"{err}. Continuing with system defaults...")
                return

        try:
            format = ConfigFormat[config_file.suffix.lstrip(".")]
        except KeyError:
            raise ValueError(
                f"Unrecognized config format {config_file}. Must be one of: "
                + ", ".join(sorted({f.value for f in ConfigFormat}))
            )

        if format.value == "json":
            self._from_json(config_file, strict)
        elif format.value == "yaml":
            self._from_yaml(config_file, strict)
        else:
            self._from_toml(config_file, strict)

    def update(self, strict: bool = False, **kwargs: Any) -> None:
        for k, v in kwargs.items():
            if k in type(self).__annotations__:
                if k == "db_file" and v is not None:
                    v = Path(v).expanduser()
                setattr(self, k, v)
            else:
                err = KeyError(f"Invalid config option: {k}")
                if strict:
                    raise err
                else:
                    logging.warning(f"{err}. Skipping...")

    def _from_json(self, config_file: Path, strict: bool = False) -> None:
        import json

        self.update(strict, **json.loads(config_file.read_text()))

    def _from_yaml(self, config_file: Path, strict: bool = False) -> None:
        try:
            import yaml
        except ModuleNotFoundError:
            logging.error(
                f"Could not import yaml to parse config {config_file}. "
                f"Use a different format or make sure PyYAML is installed correctly"
            )
            sys.exit(1)

        self.update(strict, **(yaml.safe_load(config_file.read_text()) or {}))

    def _from_toml(self, config_file: Path, strict: bool = False) -> None:
        try:
            import toml
        except ModuleNotFoundError:
            logging.error(
                f"Could not load toml to parse config {config_file}. "
                f"Use a different format or make sure toml is installed correctly"
            )
            sys.exit(1)

        self.update(strict, **toml.loads(config_file.read_text()))

    def __iter__(self):
        for k in type(self).__annotations__:
            yield (k, getattr(self, k))

    def __repr__(self) -> str:
        opts = " ".join(f"{k}={v!r}" for k, v in self)
        return f"<Config {opts}>"
