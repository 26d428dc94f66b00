"""Resolve how to reach the cluster: kubeconfig file or in-cluster credentials."""

from __future__ import annotations

import logging
import os
from pathlib import Path

import yaml
from kubernetes import client, config

from kube_clients.config import Settings, get_settings
from kube_clients.connection.models import ConnectionParameters, CredentialSource
from kube_clients.errors import ConfigError

logger = logging.getLogger(__name__)

DEFAULT_KUBECONFIG = Path(".kube") / "config"


def resolve_kubeconfig_path(settings: Settings | None = None) -> Path:
    """Return the kubeconfig path to check: explicit/KUBECONFIG first, then $HOME/.kube/config."""
    opts = settings or get_settings()
    if opts.kubeconfig:
        return Path(opts.kubeconfig)
    # An unset HOME still yields an absolute path (/.kube/config).
    return Path(os.environ.get("HOME") or "/") / DEFAULT_KUBECONFIG


def _load_kubeconfig_file(path: Path, context: str | None) -> client.Configuration:
    cfg = client.Configuration()
    try:
        config.load_kube_config(
            config_file=str(path),
            context=context,
            client_configuration=cfg,
            persist_config=False,
        )
    except (config.ConfigException, yaml.YAMLError, OSError, TypeError, ValueError) as e:
        raise ConfigError(
            f"Unable to load kubeconfig: {e}",
            source=CredentialSource.KUBECONFIG.value,
            path=str(path),
        ) from e
    return cfg


def _load_in_cluster() -> client.Configuration:
    cfg = client.Configuration()
    try:
        config.load_incluster_config(client_configuration=cfg)
    except config.ConfigException as e:
        raise ConfigError(
            f"Unable to load in-cluster configuration: {e}",
            source=CredentialSource.IN_CLUSTER.value,
        ) from e
    return cfg


def resolve_config(settings: Settings | None = None) -> ConnectionParameters:
    """
    Produce connection parameters from the environment and local filesystem.

    If a kubeconfig exists at the resolved path it is parsed; otherwise the
    in-cluster service account credentials are used. Raises ConfigError when
    the chosen source cannot be loaded.
    """
    opts = settings or get_settings()
    path = resolve_kubeconfig_path(opts)
    if path.exists():
        logger.debug("Using kubeconfig at %s", path)
        cfg = _load_kubeconfig_file(path, opts.context)
        return ConnectionParameters(
            source=CredentialSource.KUBECONFIG,
            _configuration=cfg,
            path=path,
            context=opts.context,
        )

    logger.debug("No kubeconfig at %s, using in-cluster configuration", path)
    cfg = _load_in_cluster()
    return ConnectionParameters(source=CredentialSource.IN_CLUSTER, _configuration=cfg)
