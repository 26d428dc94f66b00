"""Capability detection results."""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field


class Capability(str, Enum):
    """Outcome of a single capability detection."""

    PRESENT = "present"
    ABSENT = "absent"  # the API answered "not found"
    UNKNOWN = "unknown"  # the probe itself failed

    @property
    def present(self) -> bool:
        return self is Capability.PRESENT


class CapabilityFlags(BaseModel):
    """Optional extensions detected in the cluster."""

    model_config = ConfigDict(frozen=True)

    openshift: bool = Field(default=False, description="OpenShift project API is served")
    argo_rollouts: bool = Field(default=False, description="Argo Rollouts 'rollouts' resource is served")
