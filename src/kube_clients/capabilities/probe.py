"""Detect optional API extensions (OpenShift, Argo Rollouts) on the control plane."""

from __future__ import annotations

import logging
import threading
from typing import Callable, TypeVar

from kubernetes.client.rest import ApiException

from kube_clients.capabilities.models import Capability, CapabilityFlags
from kube_clients.clients.factory import build_discovery_client, build_kubernetes_client
from kube_clients.clients.handles import (
    ARGO_ROLLOUTS_GROUP,
    ARGO_ROLLOUTS_VERSION,
    ROLLOUTS,
    DiscoveryClient,
    KubernetesClient,
)
from kube_clients.connection.models import ConnectionParameters
from kube_clients.errors import ProbeError

logger = logging.getLogger(__name__)

T = TypeVar("T")

OPENSHIFT_PROBE_PATH = "/apis/project.openshift.io"
ARGO_ROLLOUTS_GROUP_VERSION = f"{ARGO_ROLLOUTS_GROUP}/{ARGO_ROLLOUTS_VERSION}"
ARGO_ROLLOUTS_RESOURCE = ROLLOUTS

PLATFORM_EXTENSION = "openshift"
PROGRESSIVE_DELIVERY = "argo_rollouts"


def _classify(error: ProbeError) -> Capability:
    if error.status == 404:
        return Capability.ABSENT
    return Capability.UNKNOWN


def _request(capability: str, call: Callable[[], T]) -> T:
    """Run a probe request, turning any failure into a ProbeError."""
    try:
        return call()
    except ApiException as e:
        raise ProbeError(capability, e.reason or str(e), status=e.status) from e
    except Exception as e:
        raise ProbeError(capability, str(e) or type(e).__name__) from e


def detect_platform_extension(kubernetes_client: KubernetesClient) -> Capability:
    """GET the OpenShift project API; any answer other than success counts as not present."""
    try:
        _request(PLATFORM_EXTENSION, lambda: kubernetes_client.raw_get(OPENSHIFT_PROBE_PATH))
    except ProbeError as e:
        result = _classify(e)
        if result is Capability.UNKNOWN:
            logger.debug("%s", e)
        logger.info("Environment: Kubernetes")
        return result
    logger.info("Environment: OpenShift")
    return Capability.PRESENT


def detect_progressive_delivery(discovery_client: DiscoveryClient) -> Capability:
    """Look for the 'rollouts' resource in the argoproj.io/v1alpha1 discovery document."""
    try:
        resources = _request(
            PROGRESSIVE_DELIVERY,
            lambda: discovery_client.server_resources_for_group_version(ARGO_ROLLOUTS_GROUP_VERSION),
        )
    except ProbeError as e:
        result = _classify(e)
        if result is Capability.UNKNOWN:
            logger.warning("Unable to get %s resources: %s", ARGO_ROLLOUTS_GROUP_VERSION, e)
        return result

    for resource in getattr(resources, "resources", None) or []:
        if resource.name == ARGO_ROLLOUTS_RESOURCE:
            logger.info("Argo Rollouts detected")
            return Capability.PRESENT
    return Capability.ABSENT


class CapabilityProbe:
    """
    Answers which optional extensions the cluster serves, probing each at most once.

    Detection uses the same connection parameters the extension clients are
    later built from. A failure to build the base or discovery client is
    raised; a failed probe only means "not present".
    """

    def __init__(
        self,
        params: ConnectionParameters,
        kubernetes_client: KubernetesClient | None = None,
    ) -> None:
        self.params = params
        self._kubernetes_client = kubernetes_client
        self._lock = threading.Lock()
        self._results: dict[str, Capability] = {}

    def _detect_once(self, capability: str, detect: Callable[[], Capability]) -> Capability:
        with self._lock:
            if capability not in self._results:
                self._results[capability] = detect()
            return self._results[capability]

    def _detect_platform_extension(self) -> Capability:
        kube = self._kubernetes_client or build_kubernetes_client(self.params)
        return detect_platform_extension(kube)

    def _detect_progressive_delivery(self) -> Capability:
        return detect_progressive_delivery(build_discovery_client(self.params))

    def platform_extension(self) -> Capability:
        return self._detect_once(PLATFORM_EXTENSION, self._detect_platform_extension)

    def progressive_delivery(self) -> Capability:
        return self._detect_once(PROGRESSIVE_DELIVERY, self._detect_progressive_delivery)

    def is_platform_extension_present(self) -> bool:
        return self.platform_extension().present

    def is_progressive_delivery_present(self) -> bool:
        return self.progressive_delivery().present

    def flags(self) -> CapabilityFlags:
        """Return both flags, probing whichever has not been computed yet."""
        return CapabilityFlags(
            openshift=self.is_platform_extension_present(),
            argo_rollouts=self.is_progressive_delivery_present(),
        )
