"""Connection layer: resolve credentials for the cluster control plane."""

from kube_clients.connection.models import ConnectionParameters, CredentialSource
from kube_clients.connection.resolver import resolve_config, resolve_kubeconfig_path

__all__ = [
    "ConnectionParameters",
    "CredentialSource",
    "resolve_config",
    "resolve_kubeconfig_path",
]
