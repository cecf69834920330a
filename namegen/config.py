from pathlib import Path

from pydantic import model_validator
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    separator: str = "-"

    # Bounds (inclusive) of the number appended when one is requested
    random_number_min: int = 100000
    random_number_max: int = 999999

    # Directory of <category>.txt files used instead of the bundled lists
    data_dir: Path | None = None
    cache_word_lists: bool = True

    @model_validator(mode="after")
    def _check_number_bounds(self) -> "Settings":
        if self.random_number_min > self.random_number_max:
            raise ValueError(
                f"random_number_min ({self.random_number_min}) is greater than "
                f"random_number_max ({self.random_number_max})"
            )
        return self

    model_config = {
        "env_prefix": "NAMEGEN_",
        "env_file": ".env",
        "env_file_encoding": "utf-8",
    }


settings = Settings()
