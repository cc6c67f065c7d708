from __future__ import annotations

from functools import lru_cache
from pathlib import Path

from pydantic import BaseModel, Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class ThresholdSettings(BaseModel):
    # Orchestration thresholds applied to RetrievalResult.best.score / .global_relatedness
    best_min: float = 0.18
    related_min: float = 0.1
    domain_signal_min: float = 0.22


class DialogueSettings(BaseModel):
    max_back: int = 8
    sim_threshold: float = 0.2
    max_pairs: int = 2


class LLMSettings(BaseSettings):
    # provider: "openai" (any OpenAI-compatible endpoint) or "dummy" (offline echo)
    provider: str = Field("dummy", alias="LLM_PROVIDER")
    model: str = Field("llama3-8b-instruct", alias="OPENAI_MODEL")
    api_key: str | None = Field(None, alias="OPENAI_API_KEY")
    base_url: str | None = Field(None, alias="OPENAI_BASE_URL")
    temperature: float = Field(0.4, alias="LLM_TEMPERATURE")
    max_tokens: int | None = Field(512, alias="LLM_MAX_TOKENS")

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        populate_by_name=True,
    )

    @field_validator("provider", mode="before")
    @classmethod
    def _normalize_provider(cls, v):  # type: ignore[no-untyped-def]
        if isinstance(v, str):
            return v.strip().lower() or "dummy"
        return v


class Settings(BaseSettings):
    intents_path: Path = Field(default=Path("data/intents_merged.json"))
    top_k: int = 10
    # >1 scores corpus partitions on a thread pool
    workers: int = 1
    # Optional edit-distance band; None keeps exact Levenshtein scores
    lev_max_distance: int | None = None

    best_min: float = 0.18
    related_min: float = 0.1
    domain_signal_min: float = 0.22

    dialogue_max_back: int = 8
    dialogue_sim_threshold: float = 0.2
    dialogue_max_pairs: int = 2

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        env_prefix="KB_",  # KB_INTENTS_PATH, KB_TOP_K, KB_BEST_MIN, ...
    )

    @field_validator("top_k", "workers", "dialogue_max_back", "dialogue_max_pairs")
    @classmethod
    def _at_least_one(cls, v: int) -> int:
        return max(1, int(v))

    @property
    def thresholds(self) -> ThresholdSettings:
        return ThresholdSettings(
            best_min=self.best_min,
            related_min=self.related_min,
            domain_signal_min=self.domain_signal_min,
        )

    @property
    def dialogue(self) -> DialogueSettings:
        return DialogueSettings(
            max_back=self.dialogue_max_back,
            sim_threshold=self.dialogue_sim_threshold,
            max_pairs=self.dialogue_max_pairs,
        )

    @property
    def llm(self) -> LLMSettings:
        return LLMSettings()


# Shared between CLI and API without re-parsing env
@lru_cache(maxsize=1)
def get_settings() -> Settings:
    return Settings()
