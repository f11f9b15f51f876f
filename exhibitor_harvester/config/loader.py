"""Configuration loading helpers for the exhibitor harvester."""

from __future__ import annotations

import json
import os
from dataclasses import dataclass
from pathlib import Path

import yaml

from .models import HarvestConfig

CONFIG_EXTENSIONS = (".yaml", ".yml", ".json")
CONFIG_FILENAME = "harvest_config.yaml"
HOME_ENV_VAR = "EXHIBITOR_HARVESTER_HOME"


def _read_file(path: Path) -> dict:
    text = path.read_text(encoding="utf-8")
    if path.suffix in (".yaml", ".yml"):
        data = yaml.safe_load(text) or {}
    else:
        data = json.loads(text)
    if not isinstance(data, dict):
        raise ValueError(f"Configuration file must contain a mapping: {path}")
    return data


def _write_file(path: Path, payload: dict) -> None:
    with path.open("w", encoding="utf-8") as stream:
        if path.suffix in (".yaml", ".yml"):
            yaml.safe_dump(payload, stream, allow_unicode=True, sort_keys=False)
        else:
            json.dump(payload, stream, indent=2, ensure_ascii=False)


@dataclass(slots=True)
class ConfigLocator:
    """Resolve important paths from the project home.

    The home is ``$EXHIBITOR_HARVESTER_HOME``, else ``project_root``, else the
    current working directory.
    """

    project_root: Path | None = None
    data_dir: Path | None = None
    logs_dir: Path | None = None

    def __post_init__(self) -> None:
        env_root = os.environ.get(HOME_ENV_VAR)
        if env_root:
            root = Path(env_root).expanduser().resolve()
        else:
            root = (self.project_root or Path.cwd()).resolve()
        self.project_root = root
        self.data_dir = (root / "data").resolve()
        self.logs_dir = (root / "logs").resolve()

    def config_path(self) -> Path:
        for suffix in CONFIG_EXTENSIONS:
            candidate = self.data_dir / f"harvest_config{suffix}"
            if candidate.exists():
                return candidate
        return self.data_dir / CONFIG_FILENAME


class ConfigRepository:
    """Repository encapsulating config IO and schema validation."""

    def __init__(self, locator: ConfigLocator | None = None) -> None:
        self.locator = locator or ConfigLocator()
        self._cache: HarvestConfig | None = None

    def load_config(self) -> HarvestConfig:
        if self._cache is not None:
            return self._cache
        path = self.locator.config_path()
        if path.exists():
            config = HarvestConfig.model_validate(_read_file(path))
        else:
            config = HarvestConfig()
        self._cache = config
        return config

    def save_config(self, config: HarvestConfig) -> Path:
        path = self.locator.config_path()
        path.parent.mkdir(parents=True, exist_ok=True)
        _write_file(path, config.model_dump(mode="json"))
        self._cache = config
        return path

    def outputs_dir(self, config: HarvestConfig | None = None) -> Path:
        config = config or self.load_config()
        return config.resolved_outputs_dir(self.locator.project_root)


__all__ = ["CONFIG_EXTENSIONS", "ConfigLocator", "ConfigRepository", "HOME_ENV_VAR"]
