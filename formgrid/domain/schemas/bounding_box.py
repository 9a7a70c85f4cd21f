from __future__ import annotations

from typing import Iterable

from pydantic import BaseModel, model_validator


class BoundingBox(BaseModel):
    left: float
    right: float
    top: float
    bottom: float

    @model_validator(mode="after")
    def validate_order(self) -> "BoundingBox":
        if self.left > self.right or self.top > self.bottom:
            raise ValueError("bounding box edges are inverted")
        return self

    @classmethod
    def spanning(cls, xs: Iterable[float], ys: Iterable[float]) -> "BoundingBox":
        """Build the smallest box covering all given x and y values.

        Argument order does not matter; any number (>= 1) of values per axis
        is accepted.
        """
        xs = list(xs)
        ys = list(ys)
        if not xs or not ys:
            raise ValueError("bounding box needs at least one x and one y value")
        return cls(left=min(xs), right=max(xs), top=min(ys), bottom=max(ys))

    def contains(self, x: float, y: float) -> bool:
        # inclusive on all four sides
        return self.left <= x <= self.right and self.top <= y <= self.bottom
