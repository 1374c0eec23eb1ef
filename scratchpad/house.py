"""A simple house price estimate."""

from __future__ import annotations

from dataclasses import dataclass

__all__ = ["House"]


@dataclass(frozen=True)
class House:
    """A house described by its floor area and room counts."""

    sqr_feet: int
    num_bed: int
    num_bath: int

    def price(self) -> int:
        """Estimate: 1000 per square foot, 10000 per bedroom, 5000 per bathroom."""
        return self.sqr_feet * 1000 + self.num_bed * 10000 + self.num_bath * 5000

    def __str__(self) -> str:
        return (
            f"Sqr: {self.sqr_feet}, bed: {self.num_bed}, "
            f"bath: {self.num_bath} TOTAL = {self.price()}"
        )