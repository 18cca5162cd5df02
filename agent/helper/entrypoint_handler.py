"""
Session bootstrap for a single job.
Connects to the room, builds the agent and its STT/LLM/TTS session,
starts it and queues the opening greeting.
"""

from livekit.agents import AgentSession, JobContext
from .agent_class import create_agent
from .ai_models import get_llm_instance, get_stt_instance, get_tts_instance
from .config_manager import AgentConfig
from .logging_config import get_logger
from .transcript_logger import attach_transcript_logger

logger = get_logger(__name__)


async def handle_entrypoint(ctx: JobContext):
    """Run the bootstrap sequence; failures propagate to the job runner"""
    logger.info(f"Agent connecting to room {ctx.job.room.name}")
    await ctx.connect()
    logger.info(f"Connected to room {ctx.room.name}")

    config = AgentConfig()
    agent = create_agent(config.instructions)

    # the non-streaming STT segments user audio with the prewarmed VAD
    session = AgentSession(
        stt=get_stt_instance(config),
        llm=get_llm_instance(config),
        tts=get_tts_instance(config),
        vad=ctx.proc.userdata["vad"],
    )
    attach_transcript_logger(session)

    await session.start(
        agent=agent,
        room=ctx.room,
    )
    logger.info("Agent session started")

    # queued for playout, not awaited
    session.say(config.greeting)
    logger.info("Greeting queued")
