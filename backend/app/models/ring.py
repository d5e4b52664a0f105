"""
Ring domain record.

A ring is identified by the (hall_number, number) pair. Instances are
produced by a RingProvider per query and never mutated.
"""

from dataclasses import dataclass


@dataclass(frozen=True, order=True)
class Ring:
    hall_number: int
    number: int

    def __repr__(self) -> str:
        return f"<Ring(hall={self.hall_number}, number={self.number})>"
