from .swarm import Swarm

__all__ = ["Swarm"]
