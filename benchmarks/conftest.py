from __future__ import annotations

import json
import os
import platform
import sys
from pathlib import Path

import pytest

from vellum import configure

try:
    import importlib.metadata as importlib_metadata
except ModuleNotFoundError:  # pragma: no cover
    import importlib_metadata  # type: ignore


BASE_DIR = Path(__file__).resolve().parent
BENCHMARK_OUTPUT_DIR = BASE_DIR.parent / ".benchmarks"
BENCHMARK_OUTPUT_DIR.mkdir(exist_ok=True)


def _version(dist: str) -> str:
    try:
        return importlib_metadata.version(dist)
    except importlib_metadata.PackageNotFoundError:
        return "unknown"


def collect_environment_metadata() -> dict[str, object]:
    """Capture reproducibility metadata for each benchmark run."""
    return {
        "python": {
            "version": platform.python_version(),
            "implementation": platform.python_implementation(),
            "executable": sys.executable,
        },
        "os": {
            "system": platform.system(),
            "release": platform.release(),
            "machine": platform.machine(),
        },
        "cpu": {
            "processor": platform.processor(),
            "count": os.cpu_count(),
        },
        "vellum-components": _version("vellum-components"),
    }


@pytest.fixture(scope="session")
def environment_metadata() -> dict[str, object]:
    """Write environment metadata to .benchmarks for ingestion."""
    metadata = collect_environment_metadata()
    (BENCHMARK_OUTPUT_DIR / "environment.json").write_text(json.dumps(metadata, indent=2))
    return metadata


@pytest.fixture(autouse=True)
def quiet_fallbacks():
    # Fallback logging would dominate the timings of the invalid-option cases.
    with configure(fallback_policy="ignore"):
        yield


@pytest.fixture(scope="session")
def small_contributions() -> list[object]:
    return ["LayoutBeta", {"LayoutBeta--has-header": True, "LayoutBeta--header-divider": False}, None]


@pytest.fixture(scope="session")
def large_contributions() -> list[object]:
    contributions: list[object] = []
    for index in range(200):
        contributions.append(f"token-{index % 50} extra-{index % 7}")
        contributions.append({f"flag-{index}": index % 2 == 0})
        contributions.append([f"nested-{index % 13}", None, ("deep",)])
    return contributions
