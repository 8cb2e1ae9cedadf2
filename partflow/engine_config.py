from __future__ import annotations

import json
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Optional

from partflow.core.domain.models import Interval


@dataclass(frozen=True)
class EngineConfig:
    universe_min: int = 1
    universe_max: int = 4000
    entry_name: str = "in"
    accept_name: str = "A"
    reject_name: str = "R"
    detect_cycles: bool = True
    config_id: str = "default"
    description: str = ""

    @property
    def universe(self) -> Interval:
        return Interval(self.universe_min, self.universe_max)

    def validate(self) -> None:
        if self.universe_min > self.universe_max:
            raise ValueError("universe_min must be <= universe_max")
        if not self.entry_name.strip():
            raise ValueError("entry_name must be non-empty")
        if not self.accept_name or not self.reject_name:
            raise ValueError("accept_name and reject_name must be non-empty")
        if self.accept_name == self.reject_name:
            raise ValueError("accept_name and reject_name must differ")


DEFAULT_CONFIG = EngineConfig()


def _configs_dir() -> Path:
    return Path(__file__).resolve().parent / "configs"


def _require(payload: dict[str, Any], key: str, expected_type: type) -> Any:
    if key not in payload:
        raise ValueError(f"Missing required field '{key}' in engine config")
    value = payload[key]
    if expected_type is int:
        if not isinstance(value, int) or isinstance(value, bool):
            raise ValueError(f"Field '{key}' must be int")
        return value
    if not isinstance(value, expected_type):
        raise ValueError(f"Field '{key}' must be {expected_type.__name__}")
    return value


def load_engine_config(config_id: str, configs_dir: Optional[Path] = None) -> EngineConfig:
    config_path = (configs_dir or _configs_dir()) / f"{config_id}.json"
    if not config_path.exists():
        raise ValueError(f"Unknown engine config_id: {config_id}")

    payload = json.loads(config_path.read_text(encoding="utf-8"))
    if not isinstance(payload, dict):
        raise ValueError("Engine config must be a JSON object")

    loaded_id = _require(payload, "config_id", str)
    if loaded_id != config_id:
        raise ValueError(f"config_id mismatch: requested '{config_id}', config has '{loaded_id}'")

    config = EngineConfig(
        universe_min=_require(payload, "universe_min", int),
        universe_max=_require(payload, "universe_max", int),
        entry_name=_require(payload, "entry_name", str),
        accept_name=_require(payload, "accept_name", str),
        reject_name=_require(payload, "reject_name", str),
        detect_cycles=_require(payload, "detect_cycles", bool),
        config_id=loaded_id,
        description=payload.get("description", ""),
    )
    config.validate()
    return config
