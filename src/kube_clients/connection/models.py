"""Connection parameters produced by the configuration resolver."""

from __future__ import annotations

import copy
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path

from kubernetes import client


class CredentialSource(str, Enum):
    """Where the credentials for the control plane came from."""

    KUBECONFIG = "kubeconfig"
    IN_CLUSTER = "in_cluster"


@dataclass(frozen=True)
class ConnectionParameters:
    """How to reach the control plane: endpoint, auth and TLS material.

    Built once by the resolver and never mutated afterwards; every consumer
    receives its own copy of the underlying client configuration.
    """

    source: CredentialSource
    _configuration: client.Configuration = field(repr=False, compare=False)
    path: Path | None = None
    context: str | None = None

    @property
    def host(self) -> str:
        return self._configuration.host

    def configuration(self) -> client.Configuration:
        """Return a private copy of the client configuration."""
        return copy.deepcopy(self._configuration)
