"""Configuration and environment for client bootstrap."""

from __future__ import annotations

from pathlib import Path
from typing import Literal

from pydantic import AliasChoices, Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Bootstrap settings loaded from environment and .env."""

    model_config = SettingsConfigDict(
        env_prefix="KUBE_CLIENTS_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        populate_by_name=True,
    )

    # Kubernetes
    kubeconfig: Path | None = Field(
        default=None,
        validation_alias=AliasChoices("KUBE_CLIENTS_KUBECONFIG", "KUBECONFIG"),
        description="Path to kubeconfig; falls back to $HOME/.kube/config if unset",
    )
    context: str | None = Field(default=None, description="Kubernetes context to use from the kubeconfig")

    # Logging
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = Field(
        default="INFO",
        description="Log level for the kube_clients logger",
    )

    @field_validator("kubeconfig", mode="before")
    @classmethod
    def _empty_kubeconfig_is_unset(cls, value: object) -> object:
        # An exported but empty KUBECONFIG means "use the default location".
        if isinstance(value, str) and not value.strip():
            return None
        return value


def get_settings() -> Settings:
    """Return validated settings instance."""
    return Settings()
