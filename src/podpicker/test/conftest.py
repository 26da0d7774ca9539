import pytest

from podpicker.orchestrator.models import ReplicaGroup
from podpicker.test.fakes import make_pod, make_pod_client


@pytest.fixture
def group():
    return ReplicaGroup(name="buildkit", namespace="builders")


@pytest.fixture
def scenario_client():
    return make_pod_client(
        make_pod("w-2"),
        make_pod("w-3", phase="Pending"),
        make_pod("w-1"),
    )
