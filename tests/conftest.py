from __future__ import annotations

import sys
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))

from payment_agent.config import AgentConfig


@pytest.fixture
def base_url() -> str:
    return "http://payments.test/v1"


@pytest.fixture
def agent_config(base_url: str) -> AgentConfig:
    cfg = AgentConfig(base_url=base_url)
    cfg.validate()
    return cfg
