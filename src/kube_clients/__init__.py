"""Kubernetes client bootstrap with OpenShift and Argo Rollouts detection."""

from kube_clients.bundle import (
    ClientBundle,
    ClusterContext,
    get_clients,
    is_argo_rollouts,
    is_openshift,
)
from kube_clients.errors import ClientConstructionError, ConfigError, KubeClientsError, ProbeError

__version__ = "0.1.0"

__all__ = [
    "ClientBundle",
    "ClientConstructionError",
    "ClusterContext",
    "ConfigError",
    "KubeClientsError",
    "ProbeError",
    "__version__",
    "get_clients",
    "is_argo_rollouts",
    "is_openshift",
]
