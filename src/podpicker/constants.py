from enum import Enum


class PodPhase(str, Enum):
    """Kubernetes pod lifecycle phases (status.phase)."""

    PENDING = "Pending"
    RUNNING = "Running"
    SUCCEEDED = "Succeeded"
    FAILED = "Failed"
    UNKNOWN = "Unknown"


class LoadBalanceMode(str, Enum):
    """How a chooser picks among running replicas."""

    RANDOM = "random"
    STICKY = "sticky"


# Label every replica of a group carries, valued with the group name
APP_LABEL = "app"
