"""Typed client handles for the base API and each optional extension."""

from __future__ import annotations

from typing import Any

from kubernetes import client
from kubernetes.client.rest import ApiException

# Platform extension (OpenShift) apps API
OPENSHIFT_APPS_GROUP = "apps.openshift.io"
OPENSHIFT_APPS_VERSION = "v1"
DEPLOYMENT_CONFIGS = "deploymentconfigs"

# Progressive-delivery extension (Argo Rollouts)
ARGO_ROLLOUTS_GROUP = "argoproj.io"
ARGO_ROLLOUTS_VERSION = "v1alpha1"
ROLLOUTS = "rollouts"


class KubernetesClient:
    """Handle to the base orchestration API (core and apps groups)."""

    def __init__(self, api_client: client.ApiClient) -> None:
        self.api_client = api_client
        self.core = client.CoreV1Api(api_client)
        self.apps = client.AppsV1Api(api_client)

    def raw_get(self, path: str) -> bytes:
        """
        Authenticated GET of an absolute API path; returns the undecoded body.

        Raises ApiException for any non-2xx answer.
        """
        header_params = {"Accept": "application/json"}
        if not hasattr(self.api_client, "param_serialize"):
            # kubernetes < 37: call_api serializes and checks the status itself
            response = self.api_client.call_api(
                path,
                "GET",
                header_params=header_params,
                auth_settings=["BearerToken"],
                _return_http_data_only=True,
                _preload_content=False,
            )
            return response.data

        method, url, headers, body, post_params = self.api_client.param_serialize(
            method="GET",
            resource_path=path,
            header_params=header_params,
            auth_settings=["BearerToken"],
        )
        response = self.api_client.call_api(method, url, header_params=headers, body=body, post_params=post_params)
        data = response.read()
        if not 200 <= response.status <= 299:
            raise ApiException(status=response.status, reason=response.reason)
        return data


class _GroupVersionClient:
    """Custom-objects access pinned to one API group/version."""

    group: str
    version: str

    def __init__(self, api_client: client.ApiClient) -> None:
        self.api_client = api_client
        self.custom_objects = client.CustomObjectsApi(api_client)

    @property
    def group_version(self) -> str:
        return f"{self.group}/{self.version}"

    def _list(self, plural: str, namespace: str | None = None, **kwargs: Any) -> dict[str, Any]:
        if namespace:
            return self.custom_objects.list_namespaced_custom_object(
                self.group, self.version, namespace, plural, **kwargs
            )
        return self.custom_objects.list_cluster_custom_object(self.group, self.version, plural, **kwargs)

    def _get(self, plural: str, namespace: str, name: str) -> dict[str, Any]:
        return self.custom_objects.get_namespaced_custom_object(
            self.group, self.version, namespace, plural, name
        )


class OpenShiftAppsClient(_GroupVersionClient):
    """Handle to the OpenShift apps API (DeploymentConfigs)."""

    group = OPENSHIFT_APPS_GROUP
    version = OPENSHIFT_APPS_VERSION

    def list_deployment_configs(self, namespace: str | None = None, **kwargs: Any) -> dict[str, Any]:
        return self._list(DEPLOYMENT_CONFIGS, namespace, **kwargs)

    def get_deployment_config(self, namespace: str, name: str) -> dict[str, Any]:
        return self._get(DEPLOYMENT_CONFIGS, namespace, name)


class ArgoRolloutsClient(_GroupVersionClient):
    """Handle to the Argo Rollouts API."""

    group = ARGO_ROLLOUTS_GROUP
    version = ARGO_ROLLOUTS_VERSION

    def list_rollouts(self, namespace: str | None = None, **kwargs: Any) -> dict[str, Any]:
        return self._list(ROLLOUTS, namespace, **kwargs)

    def get_rollout(self, namespace: str, name: str) -> dict[str, Any]:
        return self._get(ROLLOUTS, namespace, name)


class DiscoveryClient:
    """Lists the API resources a server advertises for a group/version."""

    def __init__(self, api_client: client.ApiClient) -> None:
        self.api_client = api_client

    def server_resources_for_group_version(self, group_version: str) -> client.V1APIResourceList:
        """Return the resource list for e.g. 'argoproj.io/v1alpha1' (or 'v1' for the core group)."""
        if "/" not in group_version:
            return client.CoreV1Api(self.api_client).get_api_resources()
        group, version = group_version.split("/", 1)
        return client.CustomObjectsApi(self.api_client).get_api_resources(group, version)
