"""Benchmark nanolight tokenization and highlighting.

Run with:
    pytest benchmarks/benchmark_tokenize.py -v --benchmark-only

Or for a quick summary:
    python benchmarks/benchmark_tokenize.py
"""

import time

from conftest import make_html_page, make_javascript_file


def benchmark_highlight(code: str, language: str, iterations: int = 20) -> float:
    """Average seconds per highlight() call."""
    from nanolight import highlight

    # Warmup
    highlight(code, language)

    start = time.perf_counter()
    for _ in range(iterations):
        highlight(code, language)
    elapsed = time.perf_counter() - start

    return elapsed / iterations


def benchmark_threaded(
    code: str,
    language: str,
    num_threads: int = 4,
    iterations: int = 5,
) -> float | None:
    """Benchmark highlighting with multiple threads (free-threaded builds only)."""
    import concurrent.futures
    import sys

    from nanolight import Highlighter

    gil_enabled = getattr(sys, "_is_gil_enabled", lambda: True)()
    if gil_enabled:
        return None

    highlighter = Highlighter()

    def work(_: int) -> None:
        highlighter(code, language)

    times = []
    for _ in range(iterations):
        start = time.perf_counter()
        with concurrent.futures.ThreadPoolExecutor(max_workers=num_threads) as ex:
            list(ex.map(work, range(num_threads * 4)))
        times.append(time.perf_counter() - start)

    return sum(times) / len(times)


def main() -> None:
    """Run benchmarks and print results."""
    import sys

    from nanolight.profiling import profiled_tokenize

    print(f"Python {sys.version.split()[0]}")
    inputs = [
        ("JavaScript, 1000 lines", make_javascript_file(), "js"),
        ("HTML with scripts, 100 sections", make_html_page(), "html"),
    ]

    print("\n" + "=" * 60)
    print("RESULTS: highlight() (single thread)")
    print("=" * 60)
    for name, code, language in inputs:
        with profiled_tokenize() as metrics:
            elapsed = benchmark_highlight(code, language)
        per_call = metrics.token_count // max(metrics.tokenize_calls, 1)
        kb = len(code) / 1024
        print(f"{name:34} {elapsed * 1000:8.2f}ms  {kb:6.1f}KB  {per_call} tokens")

    for name, code, language in inputs:
        threaded = benchmark_threaded(code, language)
        if threaded is not None:
            print(f"{name + ' (4 threads x 4)':34} {threaded * 1000:8.2f}ms")


# pytest-benchmark integration
try:
    import pytest

    @pytest.mark.benchmark(group="highlight")
    def test_benchmark_javascript(benchmark, large_javascript):
        """Benchmark a large JavaScript file."""
        from nanolight import highlight

        benchmark(highlight, large_javascript, "js")

    @pytest.mark.benchmark(group="highlight")
    def test_benchmark_html(benchmark, large_html):
        """Benchmark an HTML page with embedded scripts."""
        from nanolight import highlight

        benchmark(highlight, large_html, "html")

    @pytest.mark.benchmark(group="snippets")
    def test_benchmark_snippets(benchmark, snippets):
        """Benchmark many short snippets with detection."""
        from nanolight import Highlighter

        hl = Highlighter()

        def highlight_all():
            for snippet in snippets:
                hl(snippet)

        benchmark(highlight_all)

    @pytest.mark.benchmark(group="tokenize")
    def test_benchmark_tokenize_only(benchmark, large_html):
        """Benchmark the lexer without rendering."""
        from nanolight import tokenize

        benchmark(tokenize, large_html, "html")

except ImportError:
    pass  # pytest not available


if __name__ == "__main__":
    main()
