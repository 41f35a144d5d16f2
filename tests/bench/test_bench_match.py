"""Match benchmarks.

Measures the hot path: percent-encoding the path, RE2 full match and
parameter decoding.

Run: uv run pytest tests/bench/test_bench_match.py --benchmark-only
"""

from __future__ import annotations

from path_to_regex import compile

USERS = compile("/api/v1/users/:user_id/posts/:post_id")
DOWNLOAD = compile("/api/v1/download/:file{.:ext}")
FILES = compile("/files/*path")


def test_bench_match_hit(benchmark):
    benchmark(USERS.match, "/api/v1/users/42/posts/7")


def test_bench_match_miss(benchmark):
    benchmark(USERS.match, "/api/v1/groups/42")


def test_bench_matches_hit(benchmark):
    """Boolean protocol path, no parameter extraction."""
    benchmark(USERS.matches, "/api/v1/users/42/posts/7")


def test_bench_match_optional(benchmark):
    benchmark(DOWNLOAD.match, "/api/v1/download/archive.zip")


def test_bench_match_unicode_path(benchmark):
    benchmark(USERS.match, "/api/v1/users/józef/posts/żółw")


def test_bench_match_deep_wildcard(benchmark):
    path = "/files/" + "/".join(f"dir{i}" for i in range(50)) + "/file.txt"
    benchmark(FILES.match, path)
