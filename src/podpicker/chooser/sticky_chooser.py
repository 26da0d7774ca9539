import logging

from podpicker.chooser.base import PodChooser, split_at
from podpicker.chooser.discovery import list_running_pods
from podpicker.chooser.hashring import HashRing
from podpicker.chooser.random_chooser import pick_random
from podpicker.common.errors import NoRunningReplicasError
from podpicker.orchestrator.models import ReplicaGroup, SelectionResult
from podpicker.orchestrator.pod_client import PodClient

logger = logging.getLogger(__name__)


class StickyPodChooser(PodChooser):
    """
    Sends every call made with the same key to the same pod.

    The key is placed on a consistent hash ring of the running pod names, so
    scaling the Deployment up or down only moves a small share of keys.
    """

    def __init__(self, pod_client: PodClient, group: ReplicaGroup, key: str):
        self.pod_client = pod_client
        self.group = group
        self.key = key

    async def choose(self) -> SelectionResult:
        pods = await list_running_pods(self.pod_client, self.group)
        if not pods:
            raise NoRunningReplicasError(self.group.name, self.group.namespace)

        ring = HashRing(pod.name for pod in pods)
        chosen = ring.get_node(self.key)
        if chosen is None:
            # NOTREACHED with a non-empty ring
            logger.error(f"no pod found for key {self.key!r}, falling back to a random pod")
            return pick_random(pods)

        index = next(i for i, pod in enumerate(pods) if pod.name == chosen)
        return split_at(pods, index)
