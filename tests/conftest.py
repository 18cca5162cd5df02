import logging

import pytest

from agent.helper.logging_config import LOGGER_NAME

OVERRIDE_VARS = [
    "LLM_MODEL",
    "STT_MODEL",
    "TTS_VOICE_ID",
    "TTS_MODEL",
    "LOG_LEVEL",
]


@pytest.fixture(autouse=True)
def reset_logging():
    """Undo configure_logging so caplog sees the agent loggers"""
    yield
    logger = logging.getLogger(LOGGER_NAME)
    for handler in logger.handlers[:]:
        logger.removeHandler(handler)
    logger.propagate = True
    logger.setLevel(logging.NOTSET)


@pytest.fixture
def agent_env(monkeypatch):
    """Provider keys set, every optional override cleared"""
    monkeypatch.setenv("OPENAI_API_KEY", "sk-test")
    monkeypatch.setenv("ELEVEN_API_KEY", "eleven-test")
    for var in OVERRIDE_VARS:
        monkeypatch.delenv(var, raising=False)
    return monkeypatch
