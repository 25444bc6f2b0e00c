"""Benchmarks for Optional type.

Run with: pytest benchmarks/bench_optional.py --benchmark-only -v
"""

from optional_value import Present, coerce_to, empty, of, of_nullable, of_optional_key


# =============================================================================
# Construction benchmarks
# =============================================================================


class TestOptionalCreation:
    """Benchmark Optional construction."""

    def test_of(self, benchmark):
        benchmark(of, 42)

    def test_of_nullable_none(self, benchmark):
        benchmark(of_nullable, None)

    def test_empty(self, benchmark):
        benchmark(empty)

    def test_of_with_coercion(self, benchmark):
        """Benchmark msgspec-backed coercion on construction."""
        coercer = coerce_to(int, strict=True)
        benchmark(of, 42, coercer)

    def test_of_optional_key(self, benchmark):
        coercer = coerce_to(str, strict=True)
        benchmark(of_optional_key, {"foo": "bar"}, "foo", coercer)


# =============================================================================
# Method call benchmarks
# =============================================================================


class TestOptionalMethods:
    """Benchmark Optional method calls."""

    def test_present_get(self, benchmark):
        benchmark(of(5).get)

    def test_present_map(self, benchmark):
        opt = of(5)
        benchmark(opt.map, lambda x: x * 2)

    def test_empty_map(self, benchmark):
        benchmark(empty().map, lambda x: x * 2)

    def test_present_or_else(self, benchmark):
        benchmark(of(5).or_else, 0)

    def test_empty_or_else(self, benchmark):
        benchmark(empty().or_else, 0)

    def test_present_str(self, benchmark):
        benchmark(str, of(["foo", "bar"]))


# =============================================================================
# Chaining benchmarks
# =============================================================================


class TestOptionalChaining:
    """Benchmark chained Optional operations."""

    def test_present_chain_3(self, benchmark):
        def chain():
            return of(5).map(lambda x: x + 1).filter(lambda x: x > 5).map(lambda x: x * 2)

        benchmark(chain)

    def test_empty_chain_3(self, benchmark):
        """Benchmark 3-step chain on Empty (should short-circuit)."""

        def chain():
            return empty().map(lambda x: x + 1).filter(lambda x: x > 5).map(lambda x: x * 2)

        benchmark(chain)

    def test_match_present(self, benchmark):
        opt = of(42)

        def match_it():
            match opt:
                case Present(v):
                    return v
                case _:
                    return None

        benchmark(match_it)
