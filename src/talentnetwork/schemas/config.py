"\"\"\"Pydantic configuration schema for CLI YAML input.\"\"\""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationError

DEFAULT_DATABASE_URL = "sqlite:///talent_network.db"


class DatabaseConfig(BaseModel):
    url: str = DEFAULT_DATABASE_URL
    echo: bool = False

    model_config = ConfigDict(extra="forbid")


class ScreeningConfig(BaseModel):
    qualifying_signal_count: int | None = Field(None, ge=1)
    extensive_experience_years: int | None = Field(None, ge=1)
    minimum_experience_years: int | None = Field(None, ge=1)
    keywords: dict[str, list[str]] | None = None

    model_config = ConfigDict(extra="forbid")


class SearchConfig(BaseModel):
    min_similarity: float = Field(80.0, ge=0.0, le=100.0)

    model_config = ConfigDict(extra="forbid")


class AppConfig(BaseModel):
    database: DatabaseConfig = Field(default_factory=DatabaseConfig)
    screening: ScreeningConfig = Field(default_factory=ScreeningConfig)
    search: SearchConfig = Field(default_factory=SearchConfig)

    def to_settings(self) -> dict[str, Any]:
        settings: dict[str, Any] = {
            "database": self.database.model_dump(),
            "search": self.search.model_dump(),
        }
        screening = self.screening.model_dump(exclude_none=True)
        if screening:
            settings["screening"] = screening
        return settings


def load_config(raw: Any) -> AppConfig:
    if raw is None:
        return AppConfig()
    if not isinstance(raw, dict):
        raise ValidationError.from_exception_data(
            "AppConfig",
            [{"type": "dict_type", "loc": ("config",), "input": raw}],
        )
    return AppConfig.model_validate(raw)
