import asyncio
import logging

import pytest

from podpicker.chooser.discovery import build_label_selector, list_running_pods
from podpicker.common.errors import InvalidSelectorError
from podpicker.orchestrator.models import ReplicaGroup
from podpicker.test.fakes import make_pod, make_pod_client


def test_label_selector_matches_app_label(group):
    assert build_label_selector(group) == "app=buildkit"


@pytest.mark.parametrize("name", ["", "-buildkit", "build kit", "x" * 64, "buildkit."])
def test_label_selector_rejects_invalid_names(name):
    with pytest.raises(InvalidSelectorError):
        build_label_selector(ReplicaGroup(name=name))


@pytest.mark.asyncio
async def test_filters_running_and_sorts_by_name(group):
    pod_client = make_pod_client(
        make_pod("d", phase="Running"),
        make_pod("c", phase="Pending"),
        make_pod("b", phase="Failed"),
        make_pod("a", phase="Running"),
    )

    pods = await list_running_pods(pod_client, group)

    assert [pod.name for pod in pods] == ["a", "d"]
    pod_client.list_pods.assert_awaited_once_with(
        label_selector="app=buildkit", namespace="builders"
    )


@pytest.mark.asyncio
async def test_scenario_excludes_pending(group, scenario_client):
    pods = await list_running_pods(scenario_client, group)

    assert [pod.name for pod in pods] == ["w-1", "w-2"]


@pytest.mark.asyncio
async def test_uses_client_namespace_when_group_has_none():
    pod_client = make_pod_client(make_pod("a"), namespace="ci")

    await list_running_pods(pod_client, ReplicaGroup(name="buildkit"))

    pod_client.list_pods.assert_awaited_once_with(
        label_selector="app=buildkit", namespace="ci"
    )


@pytest.mark.asyncio
async def test_no_running_pods_is_empty_not_error(group, caplog):
    pod_client = make_pod_client(
        make_pod("a", phase="Pending"), make_pod("b", phase="Unknown")
    )

    with caplog.at_level(logging.WARNING, logger="podpicker.chooser.discovery"):
        pods = await list_running_pods(pod_client, group)

    assert pods == []
    assert "none is Running" in caplog.text


@pytest.mark.asyncio
async def test_client_errors_propagate_unchanged(group):
    pod_client = make_pod_client()
    failure = ConnectionError("api server unreachable")
    pod_client.list_pods.side_effect = failure

    with pytest.raises(ConnectionError) as exc_info:
        await list_running_pods(pod_client, group)

    assert exc_info.value is failure
    assert pod_client.list_pods.await_count == 1


@pytest.mark.asyncio
async def test_cancellation_surfaces_as_cancelled(group):
    started = asyncio.Event()

    async def slow_list_pods(**kwargs):
        started.set()
        await asyncio.sleep(60)
        return []

    pod_client = make_pod_client()
    pod_client.list_pods.side_effect = slow_list_pods

    task = asyncio.create_task(list_running_pods(pod_client, group))
    await started.wait()
    task.cancel()

    with pytest.raises(asyncio.CancelledError):
        await task
