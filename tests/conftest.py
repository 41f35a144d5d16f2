"""Conformance fixture loader.

Loads YAML fixtures from tests/fixtures/ and converts them to FixtureCase
values for parametrized testing. Each YAML document has a ``name`` and a
list of ``cases``; each case gives a pattern, a path, the expected match
flag and (for matches) the expected parameters.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

import yaml

from path_to_regex import CaseSensitivity

FIXTURE_DIR = Path(__file__).resolve().parent / "fixtures"


@dataclass
class FixtureCase:
    """A single case from a conformance fixture."""

    fixture_name: str
    pattern: str
    path: str
    matched: bool
    params: dict[str, str] = field(default_factory=dict)
    sensitivity: CaseSensitivity = CaseSensitivity.CASE_SENSITIVE

    @property
    def id(self) -> str:
        flag = "i" if self.sensitivity is CaseSensitivity.CASE_INSENSITIVE else ""
        return f"{self.fixture_name}::{self.pattern!r}{flag}~{self.path!r}"


def load_fixtures() -> list[FixtureCase]:
    """Load every fixture file, in file name order."""
    cases: list[FixtureCase] = []
    for yaml_file in sorted(FIXTURE_DIR.glob("*.yaml")):
        cases.extend(_load_file(yaml_file))
    return cases


def _load_file(path: Path) -> list[FixtureCase]:
    """Load a single fixture YAML file (may contain multiple documents)."""
    cases: list[FixtureCase] = []
    with path.open(encoding="utf-8") as f:
        for doc in yaml.safe_load_all(f):
            if doc is None:
                continue
            cases.extend(_parse_case(doc["name"], case) for case in doc["cases"])
    return cases


def _parse_case(fixture_name: str, case: dict[str, Any]) -> FixtureCase:
    params = {str(k): str(v) for k, v in (case.get("params") or {}).items()}
    sensitivity = CaseSensitivity(case.get("case_sensitivity", "case_sensitive"))
    return FixtureCase(
        fixture_name=fixture_name,
        pattern=str(case["pattern"]),
        path=str(case["path"]),
        matched=bool(case["matched"]),
        params=params,
        sensitivity=sensitivity,
    )
