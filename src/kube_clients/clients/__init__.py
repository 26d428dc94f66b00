"""Client layer: typed handles and the factory that builds them."""

from kube_clients.clients.factory import (
    build_argo_rollouts_client,
    build_discovery_client,
    build_kubernetes_client,
    build_openshift_apps_client,
)
from kube_clients.clients.handles import (
    ArgoRolloutsClient,
    DiscoveryClient,
    KubernetesClient,
    OpenShiftAppsClient,
)

__all__ = [
    "ArgoRolloutsClient",
    "DiscoveryClient",
    "KubernetesClient",
    "OpenShiftAppsClient",
    "build_argo_rollouts_client",
    "build_discovery_client",
    "build_kubernetes_client",
    "build_openshift_apps_client",
]
