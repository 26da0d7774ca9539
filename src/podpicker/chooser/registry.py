from typing import Optional

from podpicker.chooser.base import PodChooser
from podpicker.chooser.random_chooser import RandomPodChooser
from podpicker.chooser.sticky_chooser import StickyPodChooser
from podpicker.constants import LoadBalanceMode
from podpicker.orchestrator.models import ReplicaGroup
from podpicker.orchestrator.pod_client import PodClient

CHOOSER_REGISTRY = {
    LoadBalanceMode.RANDOM.value: RandomPodChooser,
    LoadBalanceMode.STICKY.value: StickyPodChooser,
}


def get_chooser(
    mode,
    *,
    pod_client: PodClient,
    group: ReplicaGroup,
    key: Optional[str] = None,
    rand_source=None,
) -> PodChooser:
    """
    Build the chooser for a load-balance mode.

    Args:
        mode: "random" or "sticky" (a LoadBalanceMode or its value)
        pod_client: Orchestrator pod lister
        group: Replica group to choose from
        key: Affinity key, required for "sticky"
        rand_source: Optional random source for "random"

    Raises:
        ValueError: If the mode is not registered or a sticky key is missing
    """
    mode_name = mode.value if isinstance(mode, LoadBalanceMode) else str(mode).lower()
    chooser_cls = CHOOSER_REGISTRY.get(mode_name)
    if not chooser_cls:
        raise ValueError(
            f"No chooser registered for load-balance mode '{mode}'. "
            f"Available modes: {list(CHOOSER_REGISTRY.keys())}"
        )

    if chooser_cls is StickyPodChooser:
        if not key:
            raise ValueError("Sticky load balancing requires a key")
        return StickyPodChooser(pod_client, group, key)

    return RandomPodChooser(pod_client, group, rand_source=rand_source)


def get_registered_modes() -> list:
    return list(CHOOSER_REGISTRY.keys())
