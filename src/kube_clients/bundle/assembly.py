"""Bundle assembly: resolve config → base client → probe → extension clients."""

from __future__ import annotations

import logging
import threading
from dataclasses import dataclass, field
from enum import Enum
from typing import Callable, TypeVar

from rich.console import Console
from rich.panel import Panel
from rich.table import Table

from kube_clients.capabilities import CapabilityFlags, CapabilityProbe
from kube_clients.clients import (
    ArgoRolloutsClient,
    KubernetesClient,
    OpenShiftAppsClient,
    build_argo_rollouts_client,
    build_kubernetes_client,
    build_openshift_apps_client,
)
from kube_clients.config import Settings, get_settings
from kube_clients.connection import ConnectionParameters, resolve_config
from kube_clients.errors import ClientConstructionError

logger = logging.getLogger(__name__)

T = TypeVar("T")


class BootstrapState(str, Enum):
    """Progress of a context through its one-shot bootstrap."""

    UNINITIALIZED = "uninitialized"
    CONFIG_RESOLVED = "config_resolved"
    BASE_CLIENT_READY = "base_client_ready"
    CAPABILITIES_PROBED = "capabilities_probed"
    BUNDLE_READY = "bundle_ready"


@dataclass(frozen=True)
class ClientBundle:
    """Clients for the base API plus whichever extensions were detected.

    The optional fields may be None even when the matching flag is True, if
    building that client failed.
    """

    kubernetes: KubernetesClient
    openshift_apps: OpenShiftAppsClient | None = None
    argo_rollouts: ArgoRolloutsClient | None = None
    capabilities: CapabilityFlags = field(default_factory=CapabilityFlags)

    @property
    def is_openshift(self) -> bool:
        return self.capabilities.openshift

    @property
    def is_argo_rollouts(self) -> bool:
        return self.capabilities.argo_rollouts


def _build_optional(builder: Callable[[ConnectionParameters], T], params: ConnectionParameters) -> T | None:
    try:
        return builder(params)
    except ClientConstructionError as e:
        logger.warning("%s", e)
        return None


class ClusterContext:
    """
    One-shot bootstrap for a single cluster.

    Configuration, base client, capability flags and bundle are each computed
    at most once and then cached on the context. Fatal failures raise
    ConfigError or ClientConstructionError; nothing is cached in that case.
    """

    def __init__(self, settings: Settings | None = None) -> None:
        self.settings = settings or get_settings()
        self.state = BootstrapState.UNINITIALIZED
        self._lock = threading.RLock()
        self._params: ConnectionParameters | None = None
        self._kubernetes: KubernetesClient | None = None
        self._probe: CapabilityProbe | None = None
        self._bundle: ClientBundle | None = None

    def _advance(self, state: BootstrapState) -> None:
        order = list(BootstrapState)
        if order.index(state) > order.index(self.state):
            self.state = state

    @property
    def params(self) -> ConnectionParameters:
        with self._lock:
            if self._params is None:
                self._params = resolve_config(self.settings)
                self._advance(BootstrapState.CONFIG_RESOLVED)
            return self._params

    @property
    def kubernetes(self) -> KubernetesClient:
        with self._lock:
            if self._kubernetes is None:
                self._kubernetes = build_kubernetes_client(self.params)
                self._advance(BootstrapState.BASE_CLIENT_READY)
            return self._kubernetes

    @property
    def probe(self) -> CapabilityProbe:
        with self._lock:
            if self._probe is None:
                self._probe = CapabilityProbe(self.params, kubernetes_client=self.kubernetes)
            return self._probe

    def is_openshift(self) -> bool:
        return self.probe.is_platform_extension_present()

    def is_argo_rollouts(self) -> bool:
        return self.probe.is_progressive_delivery_present()

    def capabilities(self) -> CapabilityFlags:
        with self._lock:
            flags = self.probe.flags()
            self._advance(BootstrapState.CAPABILITIES_PROBED)
            return flags

    def get_clients(self) -> ClientBundle:
        """Return the client bundle, building it on first call."""
        with self._lock:
            if self._bundle is not None:
                return self._bundle

            kube = self.kubernetes
            flags = self.capabilities()

            openshift_apps = None
            if flags.openshift:
                openshift_apps = _build_optional(build_openshift_apps_client, self.params)

            argo_rollouts = None
            if flags.argo_rollouts:
                argo_rollouts = _build_optional(build_argo_rollouts_client, self.params)

            self._bundle = ClientBundle(
                kubernetes=kube,
                openshift_apps=openshift_apps,
                argo_rollouts=argo_rollouts,
                capabilities=flags,
            )
            self._advance(BootstrapState.BUNDLE_READY)
            return self._bundle


def get_clients(settings: Settings | None = None) -> ClientBundle:
    """Bootstrap a fresh context and return its client bundle."""
    return ClusterContext(settings).get_clients()


_default_context: ClusterContext | None = None
_default_lock = threading.Lock()


def default_context() -> ClusterContext:
    """Return the process-wide context, creating it on first use."""
    global _default_context
    with _default_lock:
        if _default_context is None:
            _default_context = ClusterContext()
        return _default_context


def is_openshift() -> bool:
    """Whether the process-wide context's cluster serves the OpenShift project API."""
    return default_context().is_openshift()


def is_argo_rollouts() -> bool:
    """Whether the process-wide context's cluster serves Argo Rollouts."""
    return default_context().is_argo_rollouts()


def print_bundle(bundle: ClientBundle, console: Console | None = None) -> None:
    """Print detected capabilities and built clients using Rich."""
    c = console or Console()
    table = Table(show_header=True, header_style="bold")
    table.add_column("API")
    table.add_column("Detected")
    table.add_column("Client")
    table.add_row("Kubernetes", "yes", "ready")
    for name, detected, handle in (
        ("OpenShift Apps", bundle.is_openshift, bundle.openshift_apps),
        ("Argo Rollouts", bundle.is_argo_rollouts, bundle.argo_rollouts),
    ):
        status = "ready" if handle is not None else ("failed" if detected else "-")
        table.add_row(name, "yes" if detected else "no", status)
    host = bundle.kubernetes.api_client.configuration.host
    c.print(Panel(table, title=f"Cluster clients ({host})", border_style="blue"))
