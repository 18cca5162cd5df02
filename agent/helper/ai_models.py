"""
AI model configuration and initialization.
Handles STT, LLM, TTS and VAD setup.
"""

from livekit.plugins import elevenlabs, openai, silero
from .config_manager import AgentConfig
from .logging_config import get_logger

logger = get_logger(__name__)


def get_stt_instance(config: AgentConfig):
    """Get configured OpenAI STT instance"""
    stt_config = config.get_stt_config()
    try:
        stt_instance = openai.STT(**stt_config)
    except Exception as e:
        logger.error(f"Failed to create OpenAI STT: {e}")
        raise

    logger.info(f"Using OpenAI STT ({stt_config.get('model', 'default model')})")
    return stt_instance


def get_llm_instance(config: AgentConfig):
    """Get properly configured OpenAI LLM"""
    llm_config = config.get_llm_config()
    try:
        llm_instance = openai.LLM(**llm_config)
    except Exception as e:
        logger.error(f"Failed to create OpenAI LLM: {e}")
        raise

    logger.info(f"Using OpenAI LLM with model: {llm_config['model']}")
    return llm_instance


def get_tts_instance(config: AgentConfig):
    """Get configured ElevenLabs TTS instance"""
    tts_config = config.get_tts_config()
    try:
        tts_instance = elevenlabs.TTS(**tts_config)
    except Exception as e:
        logger.error(f"Failed to create ElevenLabs TTS: {e}")
        raise

    voice = tts_config.get("voice_id", "default voice")
    logger.info(f"Using ElevenLabs TTS with voice ID: {voice}")
    return tts_instance


def get_vad_instance():
    """Get configured VAD instance"""
    vad_instance = silero.VAD.load()
    logger.info("Loaded Silero VAD")
    return vad_instance
