from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional

import typer

from bktree.distance import get_distance
from bktree.tree import BKTree
from bktree.utils.config import QueryConfig, load_query_config
from bktree.utils.logging_setup import get_logger, setup_logging

app = typer.Typer(help="Build a BK-tree from a word list and run range queries.")


def _resolve_config(
    config: Path | None, metric: str | None, radius: int | None, lowercase: bool | None
) -> QueryConfig:
    try:
        cfg = load_query_config(config)
    except ValueError as e:
        raise typer.BadParameter(str(e), param_hint="--config") from e
    return QueryConfig(
        metric=metric if metric is not None else cfg.metric,
        radius=radius if radius is not None else cfg.radius,
        lowercase=lowercase if lowercase is not None else cfg.lowercase,
    )


def _parse_key(raw: str, cfg: QueryConfig):
    if cfg.metric == "hamming":
        try:
            value = int(raw, 0)
        except ValueError:
            raise typer.BadParameter(f"hamming keys must be integers, got {raw!r}") from None
        if value < 0:
            raise typer.BadParameter(f"hamming keys must be non-negative, got {raw!r}")
        return value
    return raw.lower() if cfg.lowercase else raw


def _build(words: Path, cfg: QueryConfig) -> BKTree:
    try:
        dist = get_distance(cfg.metric)
    except ValueError as e:
        raise typer.BadParameter(str(e), param_hint="--metric") from e
    lines = [ln.strip() for ln in words.read_text(encoding="utf-8").splitlines()]
    tree = BKTree(dist).insert_all(_parse_key(ln, cfg) for ln in lines if ln)
    get_logger().debug("indexed %d distinct keys from %s", len(tree), words)
    return tree


@app.command("find")
def find(
    words: Path = typer.Argument(..., exists=True, dir_okay=False, help="Word list, one key per line."),
    query: str = typer.Argument(...),
    radius: int = typer.Option(None, min=0, help="Maximum distance (default 2)."),
    metric: str = typer.Option(None, help="levenshtein or hamming (default levenshtein)."),
    config: Path = typer.Option(None, exists=True, dir_okay=False, help="YAML with metric/radius/lowercase."),
    lowercase: Optional[bool] = typer.Option(None, "--lowercase/--no-lowercase", help="Lowercase string keys and query."),
    verbose: bool = typer.Option(False, "--verbose", "-v"),
):
    """Print every key within RADIUS of QUERY as ``key<TAB>distance``."""
    setup_logging(logging.DEBUG if verbose else logging.WARNING)
    cfg = _resolve_config(config, metric, radius, lowercase)
    if cfg.radius < 0:
        raise typer.BadParameter(f"radius must be >= 0, got {cfg.radius}", param_hint="--radius")
    tree = _build(words, cfg)
    matches = tree.find(_parse_key(query, cfg), cfg.radius)
    for key, d in sorted(matches, key=lambda m: (m[1], m[0])):
        typer.echo(f"{key}\t{d}")


@app.command("keys")
def keys(
    words: Path = typer.Argument(..., exists=True, dir_okay=False),
    metric: str = typer.Option(None),
    config: Path = typer.Option(None, exists=True, dir_okay=False),
    lowercase: Optional[bool] = typer.Option(None, "--lowercase/--no-lowercase", help="Lowercase string keys."),
    verbose: bool = typer.Option(False, "--verbose", "-v"),
):
    """Print the distinct keys of WORDS under the chosen metric."""
    setup_logging(logging.DEBUG if verbose else logging.WARNING)
    cfg = _resolve_config(config, metric, None, lowercase)
    for key in _build(words, cfg):
        typer.echo(str(key))
