# Copyright (c) 2023-2025, HaiyangLi <quantocean.li at gmail dot com>
# SPDX-License-Identifier: Apache-2.0

"""Tests for flip, partial application and placeholder resolution."""

import pytest

from combinate import (
    InvalidArgumentError,
    Placeholder,
    flip,
    partial,
    partial_right,
    placeholder,
)
from combinate.fn import merge_left, merge_right, resolve_placeholders

_ = Placeholder


def collect(*args, **kwargs):
    return args, kwargs


class TestFlip:
    def test_two_arguments(self):
        assert flip(pow)(10, 2) == pow(2, 10)

    def test_extra_arguments_keep_position(self):
        concat = lambda a, b, c: a + b + c  # noqa: E731
        assert flip(concat)("a", "b", "c") == concat("b", "a", "c")

    def test_keyword_arguments_pass_through(self):
        assert flip(collect)(1, 2, 3, k="v") == ((2, 1, 3), {"k": "v"})

    def test_fewer_than_two_arguments(self):
        assert flip(collect)(1) == ((1,), {})
        assert flip(collect)() == ((), {})

    def test_wrapped_function_decides_on_arity_errors(self):
        with pytest.raises(TypeError):
            flip(pow)(2)


class TestResolvePlaceholders:
    def test_no_placeholders(self):
        assert resolve_placeholders((1, 2), (3, 4)) == ((1, 2), (3, 4))

    def test_placeholder_takes_same_position(self):
        resolved, remaining = resolve_placeholders((1, _, 3), ("a", "b", "c"))
        assert resolved == (1, "b", 3)
        assert remaining == ("a", "c")

    def test_leading_placeholder(self):
        assert resolve_placeholders((_, 2), (10, 20)) == ((10, 2), (20,))

    def test_position_past_arguments_raises(self):
        with pytest.raises(InvalidArgumentError) as exc_info:
            resolve_placeholders((1, _), ("only one",))
        assert exc_info.value.details == {"position": 1, "available": 1}

    def test_does_not_modify_inputs(self):
        bound = [_, 2]
        invoked = [1]
        resolve_placeholders(bound, invoked)
        assert bound == [_, 2]
        assert invoked == [1]

    def test_merge_left_and_right(self):
        assert merge_left((_, "x"), (1, 2)) == (1, "x", 2)
        assert merge_right((_, "x"), (1, 2)) == (2, 1, "x")


class TestPartial:
    def test_binds_leading_arguments(self):
        assert partial(pow, 2)(10) == 1024

    def test_placeholder(self):
        assert partial(pow, Placeholder, 2)(10) == 100
        assert partial(pow, placeholder(), 2)(10) == 100

    def test_remaining_arguments_are_appended(self):
        assert partial(collect, "a", _)(1, 2, 3) == (("a", 2, 1, 3), {})

    def test_reusable(self):
        add = partial(collect, 0)
        assert add(1) == ((0, 1), {})
        assert add(2) == ((0, 2), {})

    def test_keyword_arguments_merge(self):
        fn = partial(collect, 1, sep="-", end="")
        assert fn(2, end="!") == ((1, 2), {"sep": "-", "end": "!"})

    def test_unresolved_placeholder_raises_at_call_time(self):
        fn = partial(pow, 2, _)
        with pytest.raises(InvalidArgumentError):
            fn(3)

    def test_rejects_non_callable(self):
        with pytest.raises(InvalidArgumentError):
            partial("pow", 2)

    def test_propagates_errors(self):
        with pytest.raises(ZeroDivisionError):
            partial(divmod, 1)(0)


class TestPartialRight:
    def test_binds_trailing_arguments(self):
        assert partial_right(pow, 3)(10) == 1000

    def test_placeholder(self):
        assert partial_right(collect, _, "z")("a", "b") == (("b", "a", "z"), {})

    def test_all_arguments_before_bound(self):
        assert partial_right(collect, "y", "z")(1, 2) == ((1, 2, "y", "z"), {})

    def test_keyword_arguments_merge(self):
        assert partial_right(collect, k=1)(k=2) == ((), {"k": 2})

    def test_rejects_non_callable(self):
        with pytest.raises(InvalidArgumentError):
            partial_right(None)
