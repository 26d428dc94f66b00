"""Pytest configuration and fixtures for kube_clients tests."""

import json
import textwrap
import threading
from http.server import BaseHTTPRequestHandler, ThreadingHTTPServer
from pathlib import Path
from types import SimpleNamespace

import pytest

from kube_clients.config import Settings
from kube_clients.connection import ConnectionParameters, resolve_config

API_SERVER = "https://api.example.test:6443"

ROLLOUTS_RESOURCE_LIST = {
    "kind": "APIResourceList",
    "apiVersion": "v1",
    "groupVersion": "argoproj.io/v1alpha1",
    "resources": [
        {"name": "rollouts", "singularName": "rollout", "namespaced": True, "kind": "Rollout", "verbs": ["get", "list"]},
        {"name": "rollouts/status", "singularName": "", "namespaced": True, "kind": "Rollout", "verbs": ["get"]},
    ],
}

KUBECONFIG_TEMPLATE = textwrap.dedent(
    """\
    apiVersion: v1
    kind: Config
    clusters:
    - name: main
      cluster:
        server: {server}
        insecure-skip-tls-verify: true
    - name: staging
      cluster:
        server: https://staging.example.test:6443
        insecure-skip-tls-verify: true
    users:
    - name: tester
      user:
        token: sha256~testtoken
    contexts:
    - name: main
      context:
        cluster: main
        user: tester
    - name: staging
      context:
        cluster: staging
        user: tester
    current-context: main
    """
)


@pytest.fixture(autouse=True)
def isolated_env(monkeypatch, tmp_path):
    """Keep the developer's kubeconfig, .env and settings out of tests."""
    for var in (
        "KUBECONFIG",
        "KUBE_CLIENTS_KUBECONFIG",
        "KUBE_CLIENTS_CONTEXT",
        "KUBE_CLIENTS_LOG_LEVEL",
        "HTTP_PROXY",
        "HTTPS_PROXY",
        "http_proxy",
        "https_proxy",
    ):
        monkeypatch.delenv(var, raising=False)
    home = tmp_path / "home" / "u"
    home.mkdir(parents=True)
    monkeypatch.setenv("HOME", str(home))
    monkeypatch.chdir(tmp_path)
    return home


@pytest.fixture
def settings() -> Settings:
    """Settings with nothing set explicitly."""
    return Settings()


def write_kubeconfig(path: Path, server: str = API_SERVER) -> Path:
    """Write a token-based kubeconfig whose current context targets ``server``."""
    path.write_text(KUBECONFIG_TEMPLATE.format(server=server))
    return path


def params_for(kubeconfig: Path) -> ConnectionParameters:
    """Load connection parameters from a kubeconfig the way the library does."""
    return resolve_config(Settings(kubeconfig=kubeconfig))


@pytest.fixture
def kubeconfig_file(tmp_path) -> Path:
    """Write a valid token-based kubeconfig and return its path."""
    return write_kubeconfig(tmp_path / "kubeconfig")


@pytest.fixture
def connection_params(kubeconfig_file) -> ConnectionParameters:
    """Connection parameters pointing at a fake API server."""
    return params_for(kubeconfig_file)


class _APIHandler(BaseHTTPRequestHandler):
    """Answers GETs from the server's route table and records each request."""

    def do_GET(self):
        self.server.requests.append({"path": self.path, "authorization": self.headers.get("Authorization")})
        status, payload = self.server.routes.get(self.path, (404, {"kind": "Status", "code": 404}))
        body = json.dumps(payload).encode()
        self.send_response(status)
        self.send_header("Content-Type", "application/json")
        self.send_header("Content-Length", str(len(body)))
        self.end_headers()
        self.wfile.write(body)

    def log_message(self, format, *args):
        pass


@pytest.fixture
def api_server(tmp_path):
    """A local HTTP API server plus connection parameters that target it.

    Set ``api_server.routes[path] = (status, json_payload)``; unrouted paths
    answer 404. ``api_server.requests`` lists what was received.
    """
    httpd = ThreadingHTTPServer(("127.0.0.1", 0), _APIHandler)
    httpd.daemon_threads = True
    httpd.routes = {}
    httpd.requests = []
    thread = threading.Thread(target=httpd.serve_forever, daemon=True)
    thread.start()
    host, port = httpd.server_address[:2]
    kubeconfig = write_kubeconfig(tmp_path / "local-kubeconfig", server=f"http://{host}:{port}")
    yield SimpleNamespace(
        routes=httpd.routes,
        requests=httpd.requests,
        params=params_for(kubeconfig),
    )
    httpd.shutdown()
    httpd.server_close()
    thread.join()
