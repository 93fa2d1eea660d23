"""Deterministic id generators for benchmarks."""

import random
import string
from typing import Literal
from uuid import UUID

IdKind = Literal["bare", "escaped", "numeric_text", "integer", "uuid", "array", "object"]

_BARE_ALPHABET = string.ascii_letters + string.digits + "_"
_ESCAPED_ALPHABET = _BARE_ALPHABET + " -⟩é"


def generate_id(kind: IdKind, index: int, rng: random.Random) -> object:
    """Generate one id value of the requested kind."""
    if kind == "bare":
        return "".join(rng.choices(_BARE_ALPHABET, k=12)) + "x"
    if kind == "escaped":
        return "".join(rng.choices(_ESCAPED_ALPHABET, k=16))
    if kind == "numeric_text":
        return str(index)
    if kind == "integer":
        return index * 1_000_003 if index % 2 else 2**64 + index
    if kind == "uuid":
        return UUID(int=rng.getrandbits(128))
    if kind == "array":
        return [f"user{index}", index, {"at": index % 7}]
    return {"city": f"city {index}", "year": 2000 + index % 25}


def generate_ids(kind: IdKind, count: int, seed: int = 42) -> list[object]:
    """Generate count id values of one kind from a fixed seed."""
    rng = random.Random(seed)  # noqa: S311
    return [generate_id(kind, i, rng) for i in range(count)]
