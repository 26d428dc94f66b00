"""Build client handles from connection parameters."""

from __future__ import annotations

import logging
from typing import Callable, TypeVar
from urllib.parse import urlparse

from kubernetes import client

from kube_clients.clients.handles import (
    ArgoRolloutsClient,
    DiscoveryClient,
    KubernetesClient,
    OpenShiftAppsClient,
)
from kube_clients.connection.models import ConnectionParameters
from kube_clients.errors import ClientConstructionError

logger = logging.getLogger(__name__)

T = TypeVar("T")


def _api_client(params: ConnectionParameters, client_kind: str) -> client.ApiClient:
    """Validate the endpoint and wrap a private configuration copy in an ApiClient."""
    cfg = params.configuration()
    host = cfg.host or ""
    parsed = urlparse(host)
    if parsed.scheme not in ("http", "https") or not parsed.hostname:
        raise ClientConstructionError(client_kind, f"invalid API server endpoint {host!r}")
    try:
        parsed.port
    except ValueError as e:
        raise ClientConstructionError(client_kind, f"invalid API server endpoint {host!r}: {e}") from e
    return client.ApiClient(cfg)


def _build(params: ConnectionParameters, client_kind: str, factory: Callable[[client.ApiClient], T]) -> T:
    handle = factory(_api_client(params, client_kind))
    logger.debug("Created %s client for %s", client_kind, params.host)
    return handle


def build_kubernetes_client(params: ConnectionParameters) -> KubernetesClient:
    """Return a client for the base Kubernetes API."""
    return _build(params, "Kubernetes", KubernetesClient)


def build_openshift_apps_client(params: ConnectionParameters) -> OpenShiftAppsClient:
    """Return a client for the OpenShift apps API."""
    return _build(params, "OpenShift Apps", OpenShiftAppsClient)


def build_argo_rollouts_client(params: ConnectionParameters) -> ArgoRolloutsClient:
    """Return a client for the Argo Rollouts API."""
    return _build(params, "Argo Rollouts", ArgoRolloutsClient)


def build_discovery_client(params: ConnectionParameters) -> DiscoveryClient:
    """Return a discovery client used by the capability probe."""
    return _build(params, "Kubernetes discovery", DiscoveryClient)
