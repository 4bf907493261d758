"""Pytest configuration and shared fixtures.

Provides common test fixtures and configuration for the test suite.
"""

import sys
from datetime import datetime, timezone
from pathlib import Path
from typing import Generator

import pytest

# Add parent directory to path so imports work
# This allows: from models import ... to find /project/models.py
sys.path.insert(0, str(Path(__file__).parent.parent))

from counter import CompletionCounter
from logging_config import setup_logging
from models import CollectionPlan, DiagnosticsData, HostIdentity, ProbeResults


# Configure logging once for entire test session
@pytest.fixture(scope="session", autouse=True)
def configure_logging() -> Generator[None, None, None]:
    """Configure logging for all tests.

    Runs once before any tests (scope="session", autouse=True).
    """
    setup_logging(verbose=False)
    yield


@pytest.fixture
def counter() -> CompletionCounter:
    """Fresh completion counter."""
    return CompletionCounter()


@pytest.fixture
def sample_host() -> HostIdentity:
    """Linux x86_64 host identity."""
    return HostIdentity(
        hostname="workstation-42",
        os_id="linux",
        os_name="Linux",
        os_version="22.04",
        arch_id="x86_64",
        arch_name="AMD/Intel x64",
    )


@pytest.fixture
def sample_plan() -> CollectionPlan:
    """Plan with two targets, two sites and two commands."""
    return CollectionPlan(
        outbound_targets=("8.8.8.8", "1.1.1.1"),
        public_sites=("https://api.ipify.org", "https://icanhazip.com"),
        commands=("ip addr show", "ip route show"),
    )


@pytest.fixture
def sample_results() -> ProbeResults:
    """Results matching sample_plan, with one degraded route."""
    return ProbeResults(
        routes=["192.168.1.100", ""],
        public_ips=["203.0.113.5", "203.0.113.5"],
        command_outputs=[
            "1: lo: <LOOPBACK,UP,LOWER_UP> mtu 65536\n",
            "default via 192.168.1.1 dev eth0\n",
        ],
    )


@pytest.fixture
def sample_data(
    sample_host: HostIdentity,
    sample_plan: CollectionPlan,
    sample_results: ProbeResults,
) -> DiagnosticsData:
    """Complete diagnostics with a fixed timestamp."""
    return DiagnosticsData(
        generated_at=datetime(2024, 1, 2, 15, 4, 5, tzinfo=timezone.utc),
        host=sample_host,
        interface_addresses=["::1", "127.0.0.1", "192.168.1.100", "fe80::1"],
        plan=sample_plan,
        results=sample_results,
    )
