"""Built-in agents."""

from unocore.agents.human_agent import HumanAgent
from unocore.agents.protocol import AgentProtocol
from unocore.agents.random_agent import RandomAgent

__all__ = ["AgentProtocol", "HumanAgent", "RandomAgent"]
