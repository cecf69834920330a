from __future__ import annotations

from pydantic import BaseModel, Field

from namegen.config import settings


class NameRequest(BaseModel):
    categories: list[str] = []
    separator: str = Field(default_factory=lambda: settings.separator)
    include_random_number: bool = False


class GeneratedName(BaseModel):
    # One entry per requested category, spaces already replaced by the separator
    words: list[str]
    number: int | None = None
    separator: str = Field(default_factory=lambda: settings.separator)

    @property
    def tokens(self) -> list[str]:
        if self.number is None:
            return list(self.words)
        return [*self.words, str(self.number)]

    @property
    def text(self) -> str:
        return self.separator.join(self.tokens)

    def __str__(self) -> str:
        return self.text
