"""Algebraic properties of add / multiply, fuzzed with Hypothesis."""

from __future__ import annotations

import importlib.util

import pytest

if importlib.util.find_spec("hypothesis") is None:  # pragma: no cover
    pytest.skip("hypothesis not installed", allow_module_level=True)

import hypothesis.strategies as st
from hypothesis import given

from intmath.arith import add, multiply

ints = st.integers(min_value=-(2**100), max_value=2**100)


@given(ints, ints)
def test_add_commutative(a: int, b: int) -> None:
    assert add(a, b) == add(b, a)


@given(ints, ints)
def test_multiply_commutative(a: int, b: int) -> None:
    assert multiply(a, b) == multiply(b, a)


@given(ints)
def test_identities(a: int) -> None:
    assert add(a, 0) == a
    assert multiply(a, 1) == a


@given(ints)
def test_multiply_by_zero_annihilates(a: int) -> None:
    assert multiply(a, 0) == 0
    assert multiply(0, a) == 0


@given(ints, ints, ints)
def test_add_associative(a: int, b: int, c: int) -> None:
    assert add(add(a, b), c) == add(a, add(b, c))


@given(ints, ints, ints)
def test_multiply_associative(a: int, b: int, c: int) -> None:
    assert multiply(multiply(a, b), c) == multiply(a, multiply(b, c))


@given(ints, ints, ints)
def test_multiply_distributes_over_add(a: int, b: int, c: int) -> None:
    assert multiply(a, add(b, c)) == add(multiply(a, b), multiply(a, c))
