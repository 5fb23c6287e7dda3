"""Constraint-based layout solver for stacks and tables."""

from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import List, Sequence


class ConstraintKind(enum.Enum):
    FIXED = "fixed"
    FILL = "fill"
    RATIO = "ratio"


@dataclass(frozen=True)
class Constraint:
    """How a child of a stack, or a table column, is sized.

    ``FIXED`` takes exactly ``length`` units; ``RATIO`` takes ``num/den`` of the
    total; ``FILL`` shares whatever space remains equally with other fills.
    """

    kind: ConstraintKind
    length: int = 0
    num: int = 0
    den: int = 0

    @classmethod
    def fixed(cls, n: int) -> Constraint:
        return cls(ConstraintKind.FIXED, length=n)

    @classmethod
    def fill(cls) -> Constraint:
        return cls(ConstraintKind.FILL)

    @classmethod
    def ratio(cls, num: int, den: int) -> Constraint:
        return cls(ConstraintKind.RATIO, num=num, den=den)


def solve(constraints: Sequence[Constraint], total: int) -> List[int]:
    """Allocate ``total`` units across ``constraints``, one length each."""
    sizes = [0] * len(constraints)
    used = 0
    fill_indices = []

    for i, c in enumerate(constraints):
        if c.kind is ConstraintKind.FILL:
            fill_indices.append(i)
            continue
        if c.kind is ConstraintKind.FIXED:
            wanted = c.length
        else:
            wanted = 0 if c.den == 0 else total * c.num // c.den
        alloc = min(wanted, max(0, total - used))
        sizes[i] = alloc
        used += alloc

    if fill_indices:
        remaining = max(0, total - used)
        per_fill, extra = divmod(remaining, len(fill_indices))
        for n, i in enumerate(fill_indices):
            sizes[i] = per_fill + (1 if n < extra else 0)

    return sizes