"""
Consistent hash ring (ketama placement) over pod names.
"""

import bisect
import hashlib
from typing import Dict, Iterable, List, Optional

# Each node gets POINTS_PER_NODE digests, each digest yields POINTS_PER_DIGEST ring points
POINTS_PER_NODE = 40
POINTS_PER_DIGEST = 3


def _digest(value: str) -> bytes:
    return hashlib.md5(value.encode("utf-8"), usedforsecurity=False).digest()


def _point(digest: bytes, offset: int) -> int:
    return int.from_bytes(digest[offset:offset + 4], "little")


class HashRing:
    """
    Maps string keys onto a fixed set of nodes.

    Adding or removing a node only moves the keys that land on that node's
    points, about 1/N of all keys.
    """

    def __init__(self, nodes: Iterable[str]):
        self.nodes: List[str] = list(dict.fromkeys(nodes))
        self._owners: Dict[int, str] = {}

        for node in self.nodes:
            for j in range(POINTS_PER_NODE):
                digest = _digest(f"{node}-{j}")
                for i in range(POINTS_PER_DIGEST):
                    # On a point collision the node placed last owns it
                    self._owners[_point(digest, i * 4)] = node

        self._points: List[int] = sorted(self._owners)

    def __len__(self) -> int:
        return len(self.nodes)

    def get_node(self, key: str) -> Optional[str]:
        """Return the node owning ``key``, or None when the ring is empty."""
        if not self._points:
            return None
        position = _point(_digest(key), 0)
        index = bisect.bisect_right(self._points, position)
        if index == len(self._points):
            index = 0
        return self._owners[self._points[index]]
