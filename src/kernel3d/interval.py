## parameter intervals for kernel3d

## Copyright (c) 2026 kernel3d contributors
## All rights reserved

# Permission is hereby granted, free of charge, to any person
# obtaining a copy of this software and associated documentation files
# (the "Software"), to deal in the Software without restriction,
# including without limitation the rights to use, copy, modify, merge,
# publish, distribute, sublicense, and/or sell copies of the Software,
# and to permit persons to whom the Software is furnished to do so,
# subject to the following conditions:
#
# The above copyright notice and this permission notice shall be
# included in all copies or substantial portions of the Software.
#
# THE SOFTWARE IS PROVIDED "AS IS", WITHOUT WARRANTY OF ANY KIND,
# EXPRESS OR IMPLIED, INCLUDING BUT NOT LIMITED TO THE WARRANTIES OF
# MERCHANTABILITY, FITNESS FOR A PARTICULAR PURPOSE AND
# NONINFRINGEMENT. IN NO EVENT SHALL THE AUTHORS OR COPYRIGHT HOLDERS
# BE LIABLE FOR ANY CLAIM, DAMAGES OR OTHER LIABILITY, WHETHER IN AN
# ACTION OF CONTRACT, TORT OR OTHERWISE, ARISING FROM, OUT OF OR IN
# CONNECTION WITH THE SOFTWARE OR THE USE OR OTHER DEALINGS IN THE
# SOFTWARE.

"""One-dimensional parameter intervals.

An :class:`Interval` runs from ``t0`` to ``t1`` and may be decreasing.
An interval holding a NaN bound is invalid; queries on it return NaN,
``False`` or an invalid/empty interval instead of raising.
"""

from __future__ import annotations

from functools import total_ordering
from math import nan

from kernel3d import tolerance


@total_ordering
class Interval:

    __slots__ = ('t0', 't1')

    def __init__(self, t0: float, t1: float):
        self.t0 = t0
        self.t1 = t1

    @classmethod
    def empty(cls) -> 'Interval':
        return cls(0.0, 0.0)

    @classmethod
    def invalid(cls) -> 'Interval':
        return cls(nan, nan)

    def __repr__(self) -> str:
        return 'Interval({}, {})'.format(self.t0, self.t1)

    ## properties

    @property
    def is_valid(self) -> bool:
        return tolerance.is_valid_number(self.t0) and tolerance.is_valid_number(self.t1)

    @property
    def min(self) -> float:
        if not self.is_valid:
            return nan
        return min(self.t0, self.t1)

    @property
    def max(self) -> float:
        if not self.is_valid:
            return nan
        return max(self.t0, self.t1)

    @property
    def mid(self) -> float:
        if not self.is_valid:
            return nan
        return 0.5*(self.t0 + self.t1)

    @property
    def length(self) -> float:
        """signed length ``t1 - t0``; zero for an invalid interval"""
        if not self.is_valid:
            return 0.0
        return self.t1 - self.t0

    @property
    def is_singleton(self) -> bool:
        return tolerance.epsilon_equals(self.t0, self.t1)

    @property
    def is_increasing(self) -> bool:
        return self.is_valid and self.t0 < self.t1

    @property
    def is_decreasing(self) -> bool:
        return self.is_valid and self.t0 > self.t1

    ## comparison

    def equals(self, other: 'Interval', tol=None) -> bool:
        if not self.is_valid or not other.is_valid:
            return False
        return (tolerance.epsilon_equals(self.t0, other.t0, tol) and
                tolerance.epsilon_equals(self.t1, other.t1, tol))

    def __eq__(self, other):
        if not isinstance(other, Interval):
            return NotImplemented
        return self.equals(other)

    __hash__ = None

    def compare_to(self, other: 'Interval') -> float:
        """-1, 0 or 1 ordering by ``t0`` then ``t1``; NaN if either is invalid"""
        if not self.is_valid or not other.is_valid:
            return nan
        if self.t0 < other.t0:
            return -1
        if self.t0 > other.t0:
            return 1
        if self.t1 < other.t1:
            return -1
        if self.t1 > other.t1:
            return 1
        return 0

    def __lt__(self, other):
        if not isinstance(other, Interval):
            return NotImplemented
        return self.compare_to(other) < 0

    ## derived intervals

    def copy(self) -> 'Interval':
        return Interval(self.t0, self.t1)

    def swap(self) -> 'Interval':
        return Interval(self.t1, self.t0)

    def make_increasing(self) -> 'Interval':
        if not self.is_valid:
            return Interval.empty()
        if self.is_increasing:
            return self.copy()
        return self.swap()

    def reverse(self) -> 'Interval':
        """``[-t1, -t0]``"""
        if not self.is_valid:
            return Interval.empty()
        return Interval(-self.t1, -self.t0)

    def grow(self, value: float) -> 'Interval':
        """increasing interval that also includes ``value``"""
        out = self.make_increasing()
        if out.t0 > value:
            out.t0 = value
        if out.t1 < value:
            out.t1 = value
        return out

    def __add__(self, value):
        return Interval(self.t0 + value, self.t1 + value)

    def __sub__(self, value):
        return Interval(self.t0 - value, self.t1 - value)

    ## parameter mapping

    def parameter_at(self, normalized: float) -> float:
        if not self.is_valid:
            return nan
        return self.t0*(1.0 - normalized) + self.t1*normalized

    def parameter_interval_at(self, normalized: 'Interval') -> 'Interval':
        if not self.is_valid:
            return Interval.invalid()
        return Interval(self.parameter_at(normalized.t0), self.parameter_at(normalized.t1))

    def normalized_parameter_at(self, value: float) -> float:
        if not self.is_valid:
            return nan
        if tolerance.epsilon_equals(self.t0, self.t1):
            return self.t0
        return (value - self.t0) / (self.t1 - self.t0)

    def normalized_interval_at(self, interval: 'Interval') -> 'Interval':
        if not self.is_valid:
            return Interval.invalid()
        return Interval(self.normalized_parameter_at(interval.t0),
                        self.normalized_parameter_at(interval.t1))

    ## containment

    def includes_parameter(self, t: float, strict: bool = False) -> bool:
        if not self.is_valid:
            return False
        lo, hi = (self.t0, self.t1) if self.is_increasing else (self.t1, self.t0)
        if strict:
            return lo < t < hi
        return lo <= t <= hi

    def includes_interval(self, other: 'Interval', strict: bool = False) -> bool:
        if not self.is_valid or not other.is_valid:
            return False
        return (self.includes_parameter(other.t0, strict) and
                self.includes_parameter(other.t1, strict))

    def union(self, other: 'Interval') -> 'Interval':
        return union(self, other)

    def intersect(self, other: 'Interval') -> 'Interval':
        return intersect(self, other)


def _normalize_pair(a, b):
    if not a.is_valid and not b.is_valid:
        return Interval.invalid(), None
    if not a.is_valid:
        return b.make_increasing(), None
    if not b.is_valid:
        return a.make_increasing(), None
    return a.make_increasing(), b.make_increasing()


def union(a: Interval, b: Interval) -> Interval:
    """smallest increasing interval covering both"""
    a, b = _normalize_pair(a, b)
    if b is None:
        return a
    return Interval(min(a.t0, b.t0), max(a.t1, b.t1))


def intersect(a: Interval, b: Interval) -> Interval:
    """overlap of two intervals; disjoint inputs give a decreasing result"""
    a, b = _normalize_pair(a, b)
    if b is None:
        return a
    return Interval(max(a.t0, b.t0), min(a.t1, b.t1))


__all__ = ['Interval', 'union', 'intersect']
