from types import SimpleNamespace
from unittest.mock import AsyncMock

from podpicker.orchestrator.models import Replica


def make_pod(name, phase="Running", namespace="builders"):
    return Replica(
        name=name,
        phase=phase,
        namespace=namespace,
        labels={"app": "buildkit"},
        pod_ip="10.0.0.1",
        node_name="node-a",
    )


def make_pod_client(*pods, namespace="builders"):
    return SimpleNamespace(
        default_namespace=namespace,
        list_pods=AsyncMock(return_value=list(pods)),
    )


class FixedDraws:
    """Stand-in random source returning preset indexes."""

    def __init__(self, *draws):
        self.draws = list(draws)
        self.calls = []

    def randrange(self, stop):
        self.calls.append(stop)
        return self.draws.pop(0)
