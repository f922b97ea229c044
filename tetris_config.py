
"""Default settings; fixed once a game is constructed"""
from dataclasses import dataclass, fields
from typing import Optional

CONFIG = {
    "ROWS": 20,
    "COLS": 10,
    "CELL_SIZE": 30,
    "GRAVITY_MS": 500,
    "SOFT_DROP_MS": 100,
    "SEED": None,
    "FPS": 60,
}


@dataclass(frozen=True)
class Settings:
    rows: int = CONFIG["ROWS"]
    cols: int = CONFIG["COLS"]
    cell_size: int = CONFIG["CELL_SIZE"]
    gravity_ms: int = CONFIG["GRAVITY_MS"]
    soft_drop_ms: int = CONFIG["SOFT_DROP_MS"]
    seed: Optional[int] = CONFIG["SEED"]
    fps: int = CONFIG["FPS"]

    def __post_init__(self):
        for name in ("rows", "cols", "cell_size", "gravity_ms", "soft_drop_ms", "fps"):
            v = getattr(self, name)
            if not isinstance(v, int) or v <= 0:
                raise ValueError(f"{name} must be a positive int, got {v!r}")
        # the widest piece (I) has to fit
        if self.cols < 4:
            raise ValueError(f"cols must be at least 4, got {self.cols}")

    @staticmethod
    def from_config(**overrides) -> "Settings":
        """Build settings from CONFIG, with lowercase keyword overrides."""
        known = {f.name for f in fields(Settings)}
        unknown = set(overrides) - known
        if unknown:
            raise ValueError(f"unknown settings: {', '.join(sorted(unknown))}")
        values = {k.lower(): v for k, v in CONFIG.items() if k.lower() in known}
        values.update(overrides)
        return Settings(**values)
