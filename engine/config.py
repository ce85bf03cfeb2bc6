# engine/config.py
from dataclasses import dataclass, field
import os
import tomllib  # python >=3.11

# Root search window, wider than any reachable score
MIN_SCORE = -1000
MAX_SCORE = 1000

WIN_SCORE = 10
TIE_SCORE = 0
LOSE_SCORE = -10

@dataclass
class SearchConfig:
    alpha_beta: bool = True  # False runs plain minimax, kept as a reference
    min_score: int = MIN_SCORE
    max_score: int = MAX_SCORE
    win_score: int = WIN_SCORE
    tie_score: int = TIE_SCORE
    lose_score: int = LOSE_SCORE

    def validate(self):
        # the root window must lie strictly outside every terminal score
        if not (self.min_score < self.lose_score <= self.tie_score <= self.win_score < self.max_score):
            raise ValueError(
                "search scores must satisfy min_score < lose_score <= tie_score <= win_score < max_score, "
                f"got {self.min_score}, {self.lose_score}, {self.tie_score}, {self.win_score}, {self.max_score}"
            )

@dataclass
class PlayersConfig:
    human: str = "O"
    computer: str = "X"
    human_first: bool = True

    def validate(self):
        if not self.human or not self.computer:
            raise ValueError("player symbols must not be empty")
        if self.human == self.computer:
            raise ValueError(f"players must use different symbols, both are {self.human!r}")

@dataclass
class UIConfig:
    engine_name: str = "TicTacToe Engine"
    api_port: int = 8000

@dataclass
class Config:
    search: SearchConfig = field(default_factory=SearchConfig)
    players: PlayersConfig = field(default_factory=PlayersConfig)
    ui: UIConfig = field(default_factory=UIConfig)
    log_level: str = "INFO"

    @staticmethod
    def load_from_toml(path: str = "config.toml") -> "Config":
        cfg = Config()
        if not os.path.exists(path):
            return cfg
        with open(path, "rb") as f:
            raw = tomllib.load(f)
        for section in ("search", "players", "ui"):
            if section in raw:
                target = getattr(cfg, section)
                for k, v in raw[section].items():
                    if hasattr(target, k):
                        setattr(target, k, v)
        if "log_level" in raw:
            cfg.log_level = str(raw["log_level"])
        cfg.search.validate()
        cfg.players.validate()
        return cfg

# single globally importable config instance
CONFIG = Config.load_from_toml(os.environ.get("ENGINE_CONFIG_TOML", "config.toml"))
# allow env override of the log level for quick debugging
if os.environ.get("ENGINE_LOG_LEVEL"):
    CONFIG.log_level = os.environ["ENGINE_LOG_LEVEL"].upper()
