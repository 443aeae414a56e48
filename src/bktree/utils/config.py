from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Any

import yaml


def load_yaml(path: Path) -> dict[str, Any]:
    return yaml.safe_load(path.read_text(encoding="utf-8")) or {}


@dataclass(frozen=True)
class QueryConfig:
    metric: str = "levenshtein"
    radius: int = 2
    lowercase: bool = False


def load_query_config(path: Path | None) -> QueryConfig:
    """Read ``metric``/``radius``/``lowercase`` from a YAML mapping.

    Keys may sit at the top level or under a ``query`` section.
    """
    if path is None:
        return QueryConfig()
    data = load_yaml(path)
    if not isinstance(data, dict):
        raise ValueError(f"Expected a YAML mapping in {path}")
    data = data.get("query", data) or {}
    if not isinstance(data, dict):
        raise ValueError(f"Expected 'query' to be a mapping in {path}")
    default = QueryConfig()
    try:
        radius = int(data.get("radius", default.radius))
    except (TypeError, ValueError) as e:
        raise ValueError(f"Invalid radius {data.get('radius')!r} in {path}") from e
    return QueryConfig(
        metric=str(data.get("metric", default.metric)),
        radius=radius,
        lowercase=bool(data.get("lowercase", default.lowercase)),
    )
