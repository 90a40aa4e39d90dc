import logging
import os
from pathlib import Path
from typing import Optional

import yaml
from dotenv import load_dotenv
from pydantic import BaseModel, Field, field_validator

from connect4.core.board import Cell
from connect4.core.constants import SEARCH_DEPTH

load_dotenv()

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_PATH = "config/game.yaml"


class GameOptions(BaseModel):
    # 1 = AI plays first, 2 = AI plays second, None = two human players
    ai_player: Optional[int] = 2
    search_depth: int = Field(default=SEARCH_DEPTH, ge=1)
    log_level: str = "INFO"

    @field_validator("ai_player", mode="before")
    @classmethod
    def parse_ai_player(cls, value):
        # Environment overrides arrive as strings
        if isinstance(value, str) and value.strip().lower() in ("none", "null", ""):
            return None
        return value

    @field_validator("ai_player")
    @classmethod
    def check_ai_player(cls, value):
        if value is not None and value not in (1, 2):
            raise ValueError("ai_player must be 1, 2 or null")
        return value

    @field_validator("log_level")
    @classmethod
    def check_log_level(cls, value):
        value = value.upper()
        if value not in logging.getLevelNamesMapping():
            raise ValueError(f"Unknown log level: {value}")
        return value

    @property
    def ai_cell(self) -> Optional[Cell]:
        return Cell(self.ai_player) if self.ai_player is not None else None


def load_settings(config_path: Optional[str] = None) -> GameOptions:
    """Reads the YAML game options, then applies environment overrides."""
    path = Path(config_path or os.getenv("CONNECT4_CONFIG", DEFAULT_CONFIG_PATH))
    data = {}
    if path.exists():
        with open(path, "r") as f:
            data = yaml.safe_load(f) or {}
        data = data.get("game", {})
    else:
        logger.warning("Config file %s not found, using defaults", path)

    if os.getenv("CONNECT4_AI_PLAYER"):
        data["ai_player"] = os.getenv("CONNECT4_AI_PLAYER").strip()
    if os.getenv("CONNECT4_LOG_LEVEL"):
        data["log_level"] = os.getenv("CONNECT4_LOG_LEVEL")

    return GameOptions(**data)


def configure_logging(options: GameOptions):
    logging.basicConfig(
        level=options.log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


# Singleton instance
settings = load_settings()
