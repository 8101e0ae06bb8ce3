from concurrent.futures import ThreadPoolExecutor

import pytest

from purelog import (
    EmptyPipelineError,
    JoinPolicy,
    Log,
    Writer,
    compose,
    compose_all,
    pipe,
)


def uppercase(s: str) -> Writer[str]:
    return Writer(s.upper(), "used scream! ")


def words(s: str) -> Writer[list[str]]:
    return Writer(s.split(), "used words! ")


def length(xs: list[str]) -> Writer[int]:
    return Writer(len(xs), "used length!")


def tagged(tag: str):
    def stage(x: str) -> Writer[str]:
        return Writer(f"{x}{tag}", tag)

    return stage


INPUTS = ["hello world", "", "  spaced   out  ", "one", "Hello World! Today is a great day"]


class TestConcreteScenario:
    """The uppercase/words pipeline."""

    def test_stages_alone(self) -> None:
        assert uppercase("hello world") == Writer("HELLO WORLD", "used scream! ")
        assert words("HELLO WORLD") == Writer(["HELLO", "WORLD"], "used words! ")

    def test_composed(self) -> None:
        result = compose(uppercase, words)("hello world")
        assert result == Writer(["HELLO", "WORLD"], "used scream!  used words! ")

    def test_double_space_at_join_is_preserved(self) -> None:
        assert "scream!  used" in compose(uppercase, words)("hello world").log


class TestProperties:
    @pytest.mark.parametrize("x", INPUTS)
    def test_log_ordering(self, x: str) -> None:
        expected = uppercase(x).log + " " + words(uppercase(x).value).log
        assert compose(uppercase, words)(x).log == expected

    @pytest.mark.parametrize("x", INPUTS)
    def test_value_threading(self, x: str) -> None:
        assert compose(uppercase, words)(x).value == words(uppercase(x).value).value

    @pytest.mark.parametrize("x", INPUTS)
    def test_determinism(self, x: str) -> None:
        h = compose(uppercase, words)
        assert h(x) == h(x)

    def test_generic_over_value_types(self) -> None:
        to_str = lambda n: Writer(str(n), "to_str")
        to_chars = lambda s: Writer(list(s), "to_chars")
        assert compose(to_str, to_chars)(123) == Writer(["1", "2", "3"], "to_str to_chars")

    def test_nested_grouping_keeps_causal_order(self) -> None:
        a, b, c = tagged("a"), tagged("b"), tagged("c")
        left = compose(compose(a, b), c)("x")
        right = compose(a, compose(b, c))("x")

        assert left == Writer("xabc", "a b c")
        assert right == left

    def test_second_stage_sees_first_value(self) -> None:
        seen: list[str] = []

        def record(s: str) -> Writer[str]:
            seen.append(s)
            return Writer(s, "recorded")

        compose(uppercase, record)("quiet")
        assert seen == ["QUIET"]


class TestImmutability:
    def test_stage_output_is_not_mutated(self) -> None:
        prebuilt = Writer(["a"], "prebuilt")
        value_before, log_before = list(prebuilt.value), prebuilt.log

        composed = compose(lambda _: prebuilt, lambda xs: Writer(xs + ["b"], "appended"))
        result = composed(None)

        assert result == Writer(["a", "b"], "prebuilt appended")
        assert prebuilt.value == value_before
        assert prebuilt.log == log_before


class TestConcurrency:
    def test_parallel_calls_do_not_interfere(self) -> None:
        h = compose(uppercase, words)
        inputs = [f"input number {i}" for i in range(200)]

        with ThreadPoolExecutor(max_workers=8) as pool:
            results = list(pool.map(h, inputs))

        assert results == [h(x) for x in inputs]
        for x, result in zip(inputs, results):
            assert result.value == x.upper().split()
            assert result.log == "used scream!  used words! "


class TestJoin:
    def test_custom_separator(self) -> None:
        result = compose(uppercase, words, join=JoinPolicy("| "))("a b")
        assert result.log == "used scream! | used words! "

    def test_log_monoid(self) -> None:
        f = lambda s: Writer(s.upper(), Log.of("upper"))
        g = lambda s: Writer(s.split(), Log.of("split"))
        assert compose(f, g, join=Log.combine)("a b") == Writer(["A", "B"], Log.of("upper", "split"))


class TestComposeAll:
    def test_requires_stages(self) -> None:
        with pytest.raises(EmptyPipelineError):
            compose_all()

    def test_single_stage_is_returned(self) -> None:
        assert compose_all(uppercase) is uppercase

    def test_three_stages(self) -> None:
        result = compose_all(uppercase, words, length)("hello big world")
        assert result == Writer(3, "used scream!  used words!  used length!")

    def test_matches_nested_compose(self) -> None:
        a, b, c, d = tagged("a"), tagged("b"), tagged("c"), tagged("d")
        assert compose_all(a, b, c, d)("x") == compose(compose(compose(a, b), c), d)("x")

    def test_join_is_forwarded(self) -> None:
        result = compose_all(tagged("a"), tagged("b"), tagged("c"), join=JoinPolicy(","))("x")
        assert result.log == "a,b,c"


class TestPipe:
    def test_pipe_runs_immediately(self) -> None:
        assert pipe("hello world", uppercase, words) == compose(uppercase, words)("hello world")

    def test_pipe_requires_stages(self) -> None:
        with pytest.raises(EmptyPipelineError, match="pipe"):
            pipe("x")
