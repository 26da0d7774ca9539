from dataclasses import dataclass, field
from typing import Any, Dict, List, NamedTuple, Optional


@dataclass(frozen=True)
class ReplicaGroup:
    """
    Identifies the logical service whose pods are chosen from.

    ``name`` is the Deployment name; its pods carry the label ``app=<name>``.
    ``namespace`` falls back to the pod client's default when unset.
    """

    name: str
    namespace: Optional[str] = None

    @classmethod
    def from_deployment(cls, deployment: Any) -> "ReplicaGroup":
        """Build a group from a kubernetes ``V1Deployment``."""
        return cls(
            name=deployment.metadata.name,
            namespace=deployment.metadata.namespace,
        )


@dataclass(frozen=True)
class Replica:
    """Read-only handle to one worker pod, as listed by the orchestrator."""

    name: str
    phase: Optional[str]
    namespace: Optional[str] = None
    labels: Dict[str, str] = field(default_factory=dict, compare=False, hash=False)
    pod_ip: Optional[str] = None
    node_name: Optional[str] = None
    raw: Any = field(default=None, compare=False, hash=False, repr=False)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "name": self.name,
            "phase": self.phase,
            "namespace": self.namespace,
            "labels": dict(self.labels),
            "pod_ip": self.pod_ip,
            "node_name": self.node_name,
        }


class SelectionResult(NamedTuple):
    """The dispatch target plus every other running replica, in discovery order."""

    chosen: Replica
    others: List[Replica]

    def to_dict(self) -> Dict[str, Any]:
        return {
            "chosen": self.chosen.to_dict(),
            "others": [replica.to_dict() for replica in self.others],
        }
