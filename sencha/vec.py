"""N-dimensional vectors with arithmetic components."""

from __future__ import annotations

import math
from numbers import Real
from typing import Iterable, Iterator, Union

Number = Union[int, float]


def _check_component(value: object) -> Number:
    if not isinstance(value, Real):
        raise TypeError(f"Vec components must be real numbers, got {value!r}")
    return value  # type: ignore[return-value]


def _divide(value: Number, scalar: Number) -> Number:
    # Integer components divided by an integer stay integers, truncating toward zero.
    if isinstance(value, int) and isinstance(scalar, int):
        quotient = abs(value) // abs(scalar)
        return quotient if (value >= 0) == (scalar > 0) else -quotient
    return value / scalar


class Vec:
    """Vector of any positive dimension.

    The dimension is fixed at construction. Named accessors ``x`` to ``w``
    exist only when the dimension is large enough, and ``cross`` only for
    three dimensions.
    """

    __slots__ = ("_data",)

    def __init__(self, *args: Number) -> None:
        if not args:
            raise ValueError("Vec dimension must be at least 1")
        self._data: list[Number] = [_check_component(a) for a in args]

    @classmethod
    def _from_iterable(cls, values: Iterable[Number]) -> Vec:
        return cls(*values)

    # -- Shape ---------------------------------------------------------------

    @property
    def dimensions(self) -> int:
        return len(self._data)

    def __len__(self) -> int:
        return len(self._data)

    def __iter__(self) -> Iterator[Number]:
        return iter(tuple(self._data))

    # -- Named accessors -----------------------------------------------------

    def _named(self, index: int, name: str) -> Number:
        if index >= len(self._data):
            raise AttributeError(f"{len(self._data)}-dimensional Vec has no {name}")
        return self._data[index]

    def _set_named(self, index: int, name: str, value: Number) -> None:
        if index >= len(self._data):
            raise AttributeError(f"{len(self._data)}-dimensional Vec has no {name}")
        self._data[index] = _check_component(value)

    @property
    def x(self) -> Number:
        return self._named(0, "x")

    @x.setter
    def x(self, value: Number) -> None:
        self._set_named(0, "x", value)

    @property
    def y(self) -> Number:
        return self._named(1, "y")

    @y.setter
    def y(self, value: Number) -> None:
        self._set_named(1, "y", value)

    @property
    def z(self) -> Number:
        return self._named(2, "z")

    @z.setter
    def z(self, value: Number) -> None:
        self._set_named(2, "z", value)

    @property
    def w(self) -> Number:
        return self._named(3, "w")

    @w.setter
    def w(self, value: Number) -> None:
        self._set_named(3, "w", value)

    # -- Element access ------------------------------------------------------

    def _check_index(self, index: int) -> int:
        if not isinstance(index, int) or isinstance(index, bool):
            raise TypeError("Vec index must be an integer")
        if not 0 <= index < len(self._data):
            raise IndexError("Vec index out of range")
        return index

    def __getitem__(self, index: int) -> Number:
        return self._data[self._check_index(index)]

    def __setitem__(self, index: int, value: Number) -> None:
        self._data[self._check_index(index)] = _check_component(value)

    # -- Arithmetic ----------------------------------------------------------

    def _same_shape(self, other: Vec) -> None:
        if len(other._data) != len(self._data):
            raise ValueError(
                f"dimension mismatch: {len(self._data)} and {len(other._data)}"
            )

    def __add__(self, other: object) -> Vec:
        if not isinstance(other, Vec):
            return NotImplemented
        self._same_shape(other)
        return Vec._from_iterable(a + b for a, b in zip(self._data, other._data))

    def __sub__(self, other: object) -> Vec:
        if not isinstance(other, Vec):
            return NotImplemented
        self._same_shape(other)
        return Vec._from_iterable(a - b for a, b in zip(self._data, other._data))

    def __mul__(self, scalar: object) -> Vec:
        if not isinstance(scalar, Real):
            return NotImplemented
        return Vec._from_iterable(a * scalar for a in self._data)

    def __rmul__(self, scalar: object) -> Vec:
        return self.__mul__(scalar)

    def __truediv__(self, scalar: object) -> Vec:
        if not isinstance(scalar, Real):
            return NotImplemented
        if scalar == 0:
            raise ZeroDivisionError("Vec division by zero")
        return Vec._from_iterable(_divide(a, scalar) for a in self._data)  # type: ignore[arg-type]

    def __iadd__(self, other: object) -> Vec:
        if not isinstance(other, Vec):
            return NotImplemented
        self._same_shape(other)
        self._data = [a + b for a, b in zip(self._data, other._data)]
        return self

    def __isub__(self, other: object) -> Vec:
        if not isinstance(other, Vec):
            return NotImplemented
        self._same_shape(other)
        self._data = [a - b for a, b in zip(self._data, other._data)]
        return self

    def __imul__(self, scalar: object) -> Vec:
        if not isinstance(scalar, Real):
            return NotImplemented
        self._data = [a * scalar for a in self._data]
        return self

    def __itruediv__(self, scalar: object) -> Vec:
        if not isinstance(scalar, Real):
            return NotImplemented
        if scalar == 0:
            raise ZeroDivisionError("Vec division by zero")
        self._data = [_divide(a, scalar) for a in self._data]  # type: ignore[arg-type]
        return self

    def __neg__(self) -> Vec:
        return Vec._from_iterable(-a for a in self._data)

    # -- Comparison and display ----------------------------------------------

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Vec):
            return NotImplemented
        return self._data == other._data

    __hash__ = None  # type: ignore[assignment]

    def __str__(self) -> str:
        parts = (f"{c:g}" if isinstance(c, float) else str(c) for c in self._data)
        return "(" + ", ".join(parts) + ")"

    def __repr__(self) -> str:
        return "Vec(" + ", ".join(repr(c) for c in self._data) + ")"

    # -- Vector operations ---------------------------------------------------

    def dot(self, other: Vec) -> Number:
        self._same_shape(other)
        return sum((a * b for a, b in zip(self._data, other._data)), 0)

    def sqr_magnitude(self) -> Number:
        return self.dot(self)

    def magnitude(self) -> float:
        return math.sqrt(self.sqr_magnitude())

    def normalized(self) -> Vec:
        """Return a unit vector in the same direction."""
        mag = self.magnitude()
        if mag <= 0:
            raise ValueError("cannot normalize a zero-length Vec")
        return Vec._from_iterable(a / mag for a in self._data)

    def cross(self, other: Vec) -> Vec:
        """Cross product; defined only for three dimensions."""
        if len(self._data) != 3 or len(other._data) != 3:
            raise ValueError("cross product requires 3-dimensional vectors")
        ax, ay, az = self._data
        bx, by, bz = other._data
        return Vec(ay * bz - az * by, az * bx - ax * bz, ax * by - ay * bx)

    # -- Factories and utilities ---------------------------------------------

    @staticmethod
    def zero(dimensions: int) -> Vec:
        return Vec(*([0.0] * dimensions)) if dimensions > 0 else Vec()

    @staticmethod
    def one(dimensions: int) -> Vec:
        return Vec(*([1.0] * dimensions)) if dimensions > 0 else Vec()

    @staticmethod
    def lerp(a: Vec, b: Vec, t: Number) -> Vec:
        """Linear interpolation: ``a`` at ``t == 0``, ``b`` at ``t == 1``."""
        a._same_shape(b)
        return Vec._from_iterable(x + t * (y - x) for x, y in zip(a._data, b._data))

    @staticmethod
    def distance(a: Vec, b: Vec) -> float:
        return (a - b).magnitude()

    @staticmethod
    def sqr_distance(a: Vec, b: Vec) -> Number:
        return (a - b).sqr_magnitude()