from __future__ import annotations

import hashlib


class RngManager:
    """
    Single source of truth for trainer seeds.
    Derives named, order-independent child seeds by hashing:
      child_seed(name)  -> stable int seed
    A manager built from ``None`` hands out ``None`` seeds so estimators keep
    their library default (unseeded) behaviour.
    """

    def __init__(self, seed: int | None):
        self._seeded = seed is not None
        self._root = 0 if seed is None else int(seed) & 0xFFFFFFFF

    def _mix(self, name: str) -> int:
        # Stable across runs and Python versions
        h = hashlib.sha256(f"{self._root}:{name}".encode("utf-8")).digest()
        # 32 bits: sklearn's random_state must fit in uint32
        return int.from_bytes(h[:4], "little", signed=False)

    def child_seed(self, name: str) -> int | None:
        if not self._seeded:
            return None
        return self._mix(name)
