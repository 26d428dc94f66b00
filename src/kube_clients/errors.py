"""Exceptions raised while bootstrapping Kubernetes clients."""

from __future__ import annotations

from typing import Any


class KubeClientsError(Exception):
    """Base exception for client bootstrap failures."""

    def __init__(self, message: str, details: dict[str, Any] | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.details = details or {}

    def __str__(self) -> str:
        if self.details:
            return f"{self.message}: {self.details}"
        return self.message


class ConfigError(KubeClientsError):
    """Credentials could not be read, parsed, or found in-cluster."""

    def __init__(self, message: str, source: str | None = None, path: str | None = None) -> None:
        details: dict[str, Any] = {}
        if source:
            details["source"] = source
        if path:
            details["path"] = path
        super().__init__(message, details)


class ClientConstructionError(KubeClientsError):
    """Connection parameters are unusable for building a client."""

    def __init__(self, client_kind: str, reason: str) -> None:
        super().__init__(
            f"Unable to create {client_kind} client: {reason}",
            {"client": client_kind},
        )
        self.client_kind = client_kind
        self.reason = reason


class ProbeError(KubeClientsError):
    """A capability detection request failed."""

    def __init__(self, capability: str, reason: str, status: int | None = None) -> None:
        details: dict[str, Any] = {"capability": capability}
        if status is not None:
            details["status"] = status
        super().__init__(f"Probe for {capability} failed: {reason}", details)
        self.capability = capability
        self.status = status
