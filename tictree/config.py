from __future__ import annotations

from dataclasses import dataclass, fields, replace
from pathlib import Path
from typing import Any, Dict, Optional, Union

import yaml


@dataclass
class EnumerationConfig:
    render_tree: bool = True
    validate: bool = True
    tolerance: float = 1e-6
    playout_episodes: int = 10_000
    seed: Optional[int] = None
    log_level: str = "INFO"

    def with_overrides(self, **overrides: Any) -> "EnumerationConfig":
        """Return a copy with every non-None override applied."""
        return replace(self, **{key: value for key, value in overrides.items() if value is not None})


def load_yaml_config(path: Union[str, Path, None]) -> Dict[str, Any]:
    if path is None:
        return {}
    path = Path(path)
    if not path.exists():
        return {}
    return yaml.safe_load(path.read_text(encoding="utf-8")) or {}


def load_config(path: Union[str, Path, None]) -> EnumerationConfig:
    cfg = load_yaml_config(path)
    known = {f.name for f in fields(EnumerationConfig)}
    unknown = sorted(set(cfg) - known)
    if unknown:
        raise ValueError(f"Unknown config keys: {', '.join(unknown)}")
    return EnumerationConfig(**cfg)
