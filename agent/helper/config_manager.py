"""
Agent configuration.
Reads provider settings from the environment (and a local .env file).
"""

import os
from dotenv import load_dotenv

load_dotenv()

INSTRUCTIONS = "You are a helpful voice assistant. Keep responses concise."
GREETING = "Hello! How can I help you today?"
DEFAULT_LLM_MODEL = "gpt-4"


class AgentConfig:
    """Configuration class for the voice agent"""

    def __init__(self):
        # Agent behaviour
        self.instructions = INSTRUCTIONS
        self.greeting = GREETING

        # LLM Configuration
        self.llm_model = os.getenv("LLM_MODEL", DEFAULT_LLM_MODEL)

        # STT Configuration (plugin default when unset)
        self.stt_model = os.getenv("STT_MODEL") or None

        # TTS Configuration (plugin defaults when unset)
        self.tts_voice_id = os.getenv("TTS_VOICE_ID") or None
        self.tts_model = os.getenv("TTS_MODEL") or None

        self.validate()

    def validate(self):
        """Validate configuration; provider API keys are checked by the plugins"""
        if not self.llm_model.strip():
            raise ValueError("LLM_MODEL must not be empty")

    def get_llm_config(self):
        """Get LLM configuration as dict"""
        return {"model": self.llm_model}

    def get_stt_config(self):
        """Get STT configuration as dict, leaving out unset options"""
        config = {}
        if self.stt_model:
            config["model"] = self.stt_model
        return config

    def get_tts_config(self):
        """Get TTS configuration as dict, leaving out unset options"""
        config = {}
        if self.tts_voice_id:
            config["voice_id"] = self.tts_voice_id
        if self.tts_model:
            config["model"] = self.tts_model
        return config
