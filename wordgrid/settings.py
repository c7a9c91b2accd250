import logging
import os
from dataclasses import dataclass, field
from pathlib import Path


@dataclass
class Settings:
    BASE_DIR: Path = field(default_factory=lambda: Path(__file__).resolve().parent.parent)

    DICTIONARY_PATH: Path = field(init=False)

    INDEX_MIN_LENGTH: int = 3
    MIN_WORD_LENGTH: int = 4
    MAX_RESULTS: int = 50

    # Upper bound on rows * cols; keeps recursion depth and branching tractable
    MAX_CELLS: int = 36

    LOG_LEVEL: str = "INFO"
    DEBUG: bool = False

    def __post_init__(self):
        self.DICTIONARY_PATH = self.BASE_DIR / "dictionary.txt"

        # Override from environment
        for fld in self.__dataclass_fields__:
            env_val = os.environ.get(fld)
            if env_val is not None:
                current = getattr(self, fld)
                if isinstance(current, bool):
                    setattr(self, fld, env_val.lower() in ("1", "true", "yes"))
                elif isinstance(current, int):
                    setattr(self, fld, int(env_val))
                elif isinstance(current, Path):
                    setattr(self, fld, Path(env_val))
                else:
                    setattr(self, fld, env_val)

    @property
    def log_level(self) -> int:
        if self.DEBUG:
            return logging.DEBUG
        return getattr(logging, self.LOG_LEVEL.upper(), logging.INFO)


settings = Settings()
