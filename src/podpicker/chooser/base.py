from abc import ABC, abstractmethod
from typing import List

from podpicker.orchestrator.models import Replica, SelectionResult


class PodChooser(ABC):
    """
    Chooses the pod that should handle one unit of work.

    Callers dispatch to ``chosen`` and may fall back to ``others`` without
    querying the orchestrator again. Implementations keep only their own
    immutable configuration; every call lists pods afresh.
    """

    @abstractmethod
    async def choose(self) -> SelectionResult:
        """
        Returns the selected pod and the other running pods.

        Raises:
            NoRunningReplicasError: if the group has no Running pod
        """
        raise NotImplementedError


def split_at(pods: List[Replica], index: int) -> SelectionResult:
    """Take ``pods[index]`` as chosen; the rest keep their order."""
    return SelectionResult(pods[index], pods[:index] + pods[index + 1:])
