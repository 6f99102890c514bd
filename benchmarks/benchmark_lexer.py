"""Lexer throughput benchmarks.

Run with:
    pytest benchmarks/benchmark_lexer.py -v --benchmark-only

Or for a quick timing:
    python benchmarks/benchmark_lexer.py
"""

import time

from scanlet import Lexer


def time_lex(source: str, iterations: int = 20) -> float:
    """Average seconds per full scan of source."""
    Lexer(source).lex()  # Warmup

    start = time.perf_counter()
    for _ in range(iterations):
        Lexer(source).lex()
    return (time.perf_counter() - start) / iterations


def main() -> None:
    from conftest import PROGRAM

    source = PROGRAM * 800
    elapsed = time_lex(source)
    tokens = len(Lexer(source).lex())
    print(f"{len(source):,} chars, {tokens:,} tokens")
    print(f"{elapsed * 1000:8.2f}ms per scan  ({tokens / elapsed:,.0f} tokens/s)")


# pytest-benchmark integration
try:
    import pytest

    @pytest.mark.benchmark(group="lex")
    def test_benchmark_small(benchmark, small_program):
        benchmark(lambda: Lexer(small_program).lex())

    @pytest.mark.benchmark(group="lex")
    def test_benchmark_large(benchmark, large_program):
        benchmark(lambda: Lexer(large_program).lex())

    @pytest.mark.benchmark(group="next-token")
    def test_benchmark_next_token_loop(benchmark, large_program):
        """Drive next_token directly, as a parser would."""

        def drain():
            lexer = Lexer(large_program)
            count = 0
            for _ in lexer.tokenize():
                count += 1
            return count

        benchmark(drain)

except ImportError:
    pass


if __name__ == "__main__":
    main()
