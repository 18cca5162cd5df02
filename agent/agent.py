from __future__ import annotations

from livekit.agents import JobContext, JobProcess, cli, WorkerOptions
from .helper.ai_models import get_vad_instance
from .helper.entrypoint_handler import handle_entrypoint
from .helper.logging_config import configure_logging


def prewarm_fnc(proc: JobProcess):
    """Prewarm function to load VAD model"""
    proc.userdata["vad"] = get_vad_instance()


async def entrypoint(ctx: JobContext):
    """Main entrypoint for the agent - delegates to handler"""
    await handle_entrypoint(ctx)


if __name__ == "__main__":
    logger = configure_logging()
    logger.info("Starting voice agent worker")
    logger.info("Components: OpenAI STT + OpenAI LLM + ElevenLabs TTS + Silero VAD")

    cli.run_app(
        WorkerOptions(
            entrypoint_fnc=entrypoint,
            prewarm_fnc=prewarm_fnc,
        )
    )
