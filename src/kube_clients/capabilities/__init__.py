"""Capability layer: detect optional extensions served by the cluster."""

from kube_clients.capabilities.models import Capability, CapabilityFlags
from kube_clients.capabilities.probe import (
    CapabilityProbe,
    detect_platform_extension,
    detect_progressive_delivery,
)

__all__ = [
    "Capability",
    "CapabilityFlags",
    "CapabilityProbe",
    "detect_platform_extension",
    "detect_progressive_delivery",
]
