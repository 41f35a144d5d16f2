"""Compile benchmarks.

Measures pattern compilation cost: tokenizing, codegen and RE2 compile.

Run: uv run pytest tests/bench/test_bench_compile.py --benchmark-only
"""

from __future__ import annotations

from path_to_regex import CaseSensitivity, compile, make_pattern


def test_bench_compile_static(benchmark):
    benchmark(compile, "/api/v1/users")


def test_bench_compile_params(benchmark):
    benchmark(compile, "/api/v1/users/:user_id/posts/:post_id")


def test_bench_compile_optional_and_wildcard(benchmark):
    benchmark(compile, "/api/v1/download/:file{.:ext}{/*rest}")


def test_bench_compile_custom_sub_pattern(benchmark):
    benchmark(
        compile,
        r"/orders/:id([a-f0-9]{8}-[a-f0-9]{4}-[a-f0-9]{4}-[a-f0-9]{4}-[a-f0-9]{12})",
    )


def test_bench_compile_case_insensitive(benchmark):
    benchmark(compile, "/API/V1/Users/:id", CaseSensitivity.CASE_INSENSITIVE)


def test_bench_compile_unicode(benchmark):
    benchmark(compile, "/catégorie/:nom/café/*reste")


def test_bench_make_pattern_only(benchmark):
    """Codegen alone, without the RE2 compile step."""
    benchmark(make_pattern, "/api/v1/users/:user_id/posts/:post_id")
