"""
Read-only Kubernetes pod listing used by replica discovery.
"""

import asyncio
import logging
from typing import Any, List, Optional, Protocol

from kubernetes import client, config as k8s_config
from kubernetes.client.rest import ApiException

from podpicker.orchestrator.models import Replica

logger = logging.getLogger(__name__)


class PodClient(Protocol):
    """
    What discovery needs from the orchestrator: list pods matching a label
    selector inside one namespace.
    """

    default_namespace: str

    async def list_pods(
        self, *, label_selector: str, namespace: Optional[str] = None
    ) -> List[Replica]:
        ...


def replica_from_pod(pod: Any) -> Replica:
    """Convert a kubernetes ``V1Pod`` into a Replica."""
    metadata = pod.metadata
    status = pod.status
    spec = pod.spec
    return Replica(
        name=metadata.name,
        phase=status.phase if status else None,
        namespace=metadata.namespace,
        labels=dict(metadata.labels or {}),
        pod_ip=status.pod_ip if status else None,
        node_name=spec.node_name if spec else None,
        raw=pod,
    )


class KubernetesPodClient:
    """
    Pod lister backed by the official kubernetes client.

    The CoreV1Api is created on first use. Calls run in a worker thread so
    a cancelled caller stops waiting on the API server immediately.
    """

    def __init__(
        self,
        api: Optional[client.CoreV1Api] = None,
        *,
        namespace: str = "default",
        config_path: Optional[str] = None,
        in_cluster: bool = False,
        request_timeout: Optional[float] = None,
    ):
        self._api = api
        self.default_namespace = namespace
        self._config_path = config_path
        self._in_cluster = in_cluster
        self._request_timeout = request_timeout

    @classmethod
    def from_settings(cls, settings, **overrides) -> "KubernetesPodClient":
        return cls(**{**settings.get_k8s_config(), **overrides})

    @property
    def api(self) -> client.CoreV1Api:
        if self._api is None:
            if self._in_cluster:
                k8s_config.load_incluster_config()
            else:
                k8s_config.load_kube_config(config_file=self._config_path)
            self._api = client.CoreV1Api()
        return self._api

    async def list_pods(
        self, *, label_selector: str, namespace: Optional[str] = None
    ) -> List[Replica]:
        namespace = namespace or self.default_namespace
        kwargs = {"label_selector": label_selector}
        if self._request_timeout:
            kwargs["_request_timeout"] = self._request_timeout

        try:
            pod_list = await asyncio.to_thread(
                self.api.list_namespaced_pod, namespace, **kwargs
            )
        except ApiException as e:
            logger.error(
                f"Listing pods failed: namespace={namespace} selector={label_selector} "
                f"status={e.status} reason={e.reason}"
            )
            raise

        return [replica_from_pod(pod) for pod in pod_list.items or []]
