"""CLI entrypoint: bootstrap cluster clients and report detected capabilities."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from pydantic import ValidationError
from rich.console import Console
from rich.logging import RichHandler

from kube_clients import __version__
from kube_clients.bundle import ClusterContext, print_bundle
from kube_clients.config import get_settings
from kube_clients.errors import KubeClientsError


def _parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Build Kubernetes clients and detect OpenShift / Argo Rollouts support.",
        formatter_class=argparse.ArgumentDefaultsHelpFormatter,
    )
    parser.add_argument(
        "--kubeconfig",
        type=Path,
        default=None,
        help="Path to kubeconfig (default: KUBECONFIG env or ~/.kube/config)",
    )
    parser.add_argument(
        "--context",
        default=None,
        help="Kubernetes context to use",
    )
    parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Enable verbose logging",
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    """Entrypoint for kube-clients CLI."""
    args = _parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(rich_tracebacks=True)],
    )
    logger = logging.getLogger("kube_clients")

    try:
        settings = get_settings()
        logger.setLevel(logging.DEBUG if args.verbose else settings.log_level)
        if args.kubeconfig:
            settings.kubeconfig = args.kubeconfig
        if args.context:
            settings.context = args.context

        bundle = ClusterContext(settings).get_clients()
    except (KubeClientsError, ValidationError) as e:
        logger.error("%s", e)
        print(f"Error: {e}", file=sys.stderr)
        return 2
    print_bundle(bundle, Console())
    return 0


if __name__ == "__main__":
    sys.exit(main())
