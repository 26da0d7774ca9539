"""
Error types raised by podpicker.

Orchestrator failures (API, network, auth) are not wrapped here; they reach
the caller as the exception the Kubernetes client raised.
"""

from typing import Any, Dict, Optional


class PodPickerError(Exception):
    """Base class for podpicker failures."""

    code: str = "PODPICKER_ERROR"

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.message = message
        self.details = details or {}

    def to_dict(self) -> Dict[str, Any]:
        return {
            "code": self.code,
            "message": self.message,
            "details": self.details,
        }


class NoRunningReplicasError(PodPickerError):
    """Discovery succeeded but no replica of the group is Running."""

    code = "NO_RUNNING_REPLICAS"

    def __init__(self, group_name: str, namespace: Optional[str] = None):
        super().__init__(
            "no running replicas",
            details={"group": group_name, "namespace": namespace},
        )
        self.group_name = group_name
        self.namespace = namespace

    def __str__(self) -> str:
        return f"no running replicas for group {self.group_name!r}"


class InvalidSelectorError(PodPickerError):
    """The replica group name cannot be used as a label selector value."""

    code = "INVALID_SELECTOR"
