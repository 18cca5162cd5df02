from livekit.agents import AgentSession
from .logging_config import get_logger

logger = get_logger(__name__)


def attach_transcript_logger(session: AgentSession) -> None:
    """Log every item committed to the conversation history"""

    def on_conversation_item_added(event):
        item = event.item

        if item.role == "user":
            logger.info(f"[USER] {item.text_content}")

        elif item.role == "assistant":
            logger.info(f"[AGENT] {item.text_content}")

    session.on("conversation_item_added")(on_conversation_item_added)
