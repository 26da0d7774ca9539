"""
Replica discovery: list the running pods of a replica group.
"""

import logging
import re
from typing import List

from podpicker.common.errors import InvalidSelectorError
from podpicker.constants import APP_LABEL, PodPhase
from podpicker.orchestrator.models import Replica, ReplicaGroup
from podpicker.orchestrator.pod_client import PodClient

logger = logging.getLogger(__name__)

LABEL_VALUE_MAX_LENGTH = 63
_LABEL_VALUE_RE = re.compile(r"^([A-Za-z0-9][-A-Za-z0-9_.]*)?[A-Za-z0-9]$")


def build_label_selector(group: ReplicaGroup) -> str:
    """Return the ``app=<name>`` selector matching every pod of the group."""
    name = group.name
    if (
        not name
        or len(name) > LABEL_VALUE_MAX_LENGTH
        or not _LABEL_VALUE_RE.match(name)
    ):
        raise InvalidSelectorError(
            f"invalid label value for {APP_LABEL!r}: {name!r}",
            details={"group": name},
        )
    return f"{APP_LABEL}={name}"


async def list_running_pods(pod_client: PodClient, group: ReplicaGroup) -> List[Replica]:
    """
    Returns the Running pods of ``group`` sorted by name.

    An empty list is a valid result. Errors from the pod client, including
    cancellation, propagate unchanged.
    """
    label_selector = build_label_selector(group)
    namespace = group.namespace or pod_client.default_namespace

    pods = await pod_client.list_pods(label_selector=label_selector, namespace=namespace)

    running_pods = []
    for pod in pods:
        if pod.phase == PodPhase.RUNNING.value:
            logger.debug(f"pod running: {pod.name!r}")
            running_pods.append(pod)

    if pods and not running_pods:
        logger.warning(
            f"{len(pods)} pod(s) match {label_selector} in {namespace} but none is Running"
        )

    running_pods.sort(key=lambda pod: pod.name)
    return running_pods
