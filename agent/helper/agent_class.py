"""
Voice assistant agent definition.
"""

from livekit.agents import Agent


def create_agent(instructions: str) -> Agent:
    """Factory function to create the voice assistant agent"""
    return Agent(instructions=instructions)
