"""Bundle layer: assemble all client handles for the calling application."""

from kube_clients.bundle.assembly import (
    BootstrapState,
    ClientBundle,
    ClusterContext,
    default_context,
    get_clients,
    is_argo_rollouts,
    is_openshift,
    print_bundle,
)

__all__ = [
    "BootstrapState",
    "ClientBundle",
    "ClusterContext",
    "default_context",
    "get_clients",
    "is_argo_rollouts",
    "is_openshift",
    "print_bundle",
]
