"""Load ledger settings from a TOML file."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any
import tomllib

from domain.elo.calculator import EloParameters

DEFAULT_DB_URL = "sqlite:///kfactor.db"


@dataclass(frozen=True)
class LedgerConfig:
    """Runtime settings for one ledger database."""

    db_url: str = DEFAULT_DB_URL
    elo: EloParameters = field(default_factory=EloParameters)
    leaderboard_default_limit: int = 10
    username_min_length: int = 3
    username_max_length: int = 20
    file_path: Path | None = None

    @classmethod
    def default(cls) -> LedgerConfig:
        return cls()

    def as_config_json(self) -> dict[str, Any]:
        return {
            "db_url": self.db_url,
            "initial_rating": self.elo.initial_rating,
            "k_factor": self.elo.k_factor,
            "scale_factor": self.elo.scale_factor,
            "leaderboard_default_limit": self.leaderboard_default_limit,
            "username_min_length": self.username_min_length,
            "username_max_length": self.username_max_length,
        }


def load_ledger_config(file_path: Path) -> LedgerConfig:
    """Load and validate a ledger TOML config file."""
    if not file_path.exists():
        raise FileNotFoundError(f"Config file not found: {file_path}")
    if not file_path.is_file():
        raise ValueError(f"Config path is not a file: {file_path}")

    with file_path.open("rb") as file:
        raw = tomllib.load(file)
    return _parse_ledger_config(raw, file_path)


def _parse_ledger_config(raw: dict[str, Any], file_path: Path) -> LedgerConfig:
    database_raw = raw.get("database", {})
    elo_raw = raw.get("elo", {})
    leaderboard_raw = raw.get("leaderboard", {})
    participants_raw = raw.get("participants", {})

    db_url = str(database_raw.get("url", DEFAULT_DB_URL)).strip()
    if not db_url:
        raise ValueError(f"{file_path}: [database].url must not be empty")

    elo = EloParameters(
        initial_rating=int(elo_raw.get("initial_rating", 1000)),
        k_factor=float(elo_raw.get("k_factor", 32.0)),
        scale_factor=float(elo_raw.get("scale_factor", 400.0)),
    )
    if elo.k_factor <= 0.0:
        raise ValueError(f"{file_path}: [elo].k_factor must be > 0")
    if elo.scale_factor <= 0.0:
        raise ValueError(f"{file_path}: [elo].scale_factor must be > 0")

    default_limit = int(leaderboard_raw.get("default_limit", 10))
    if default_limit <= 0:
        raise ValueError(f"{file_path}: [leaderboard].default_limit must be > 0")

    min_length = int(participants_raw.get("username_min_length", 3))
    max_length = int(participants_raw.get("username_max_length", 20))
    if min_length < 1:
        raise ValueError(f"{file_path}: [participants].username_min_length must be >= 1")
    if max_length < min_length:
        raise ValueError(
            f"{file_path}: [participants].username_max_length must be >= username_min_length"
        )
    if max_length > 20:
        raise ValueError(f"{file_path}: [participants].username_max_length must be <= 20")

    return LedgerConfig(
        db_url=db_url,
        elo=elo,
        leaderboard_default_limit=default_limit,
        username_min_length=min_length,
        username_max_length=max_length,
        file_path=file_path,
    )


__all__ = ["DEFAULT_DB_URL", "LedgerConfig", "load_ledger_config"]
