import logging
import random
import time
from typing import List, Optional

from podpicker.chooser.base import PodChooser, split_at
from podpicker.chooser.discovery import list_running_pods
from podpicker.common.errors import NoRunningReplicasError
from podpicker.orchestrator.models import Replica, ReplicaGroup, SelectionResult
from podpicker.orchestrator.pod_client import PodClient

logger = logging.getLogger(__name__)


def pick_random(pods: List[Replica], rand_source: Optional[random.Random] = None) -> SelectionResult:
    """Uniformly pick one of ``pods``, which must not be empty."""
    # A fresh source per call keeps concurrent callers from sharing state
    rnd = rand_source if rand_source is not None else random.Random(time.time_ns())
    n = rnd.randrange(len(pods))
    logger.debug(f"RandomPodChooser.choose(): len(pods)={len(pods)}, n={n}")
    return split_at(pods, n)


class RandomPodChooser(PodChooser):
    """
    Picks a running pod uniformly at random.

    Pass ``rand_source`` (anything with ``randrange``) for reproducible picks.
    """

    def __init__(
        self,
        pod_client: PodClient,
        group: ReplicaGroup,
        rand_source: Optional[random.Random] = None,
    ):
        self.pod_client = pod_client
        self.group = group
        self.rand_source = rand_source

    async def choose(self) -> SelectionResult:
        pods = await list_running_pods(self.pod_client, self.group)
        if not pods:
            raise NoRunningReplicasError(self.group.name, self.group.namespace)
        return pick_random(pods, self.rand_source)
