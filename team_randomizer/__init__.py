"""Team Randomizer - Keep a roster of members and split it into random, balanced teams."""

__version__ = "0.1.0"

from .config import Config
from .partitioner import TeamAssignment, partition
from .persistence import PersistenceBridge
from .roster import ActiveEdit, RosterStore
from .session import TeamRandomizer

__all__ = [
    "ActiveEdit",
    "Config",
    "PersistenceBridge",
    "RosterStore",
    "TeamAssignment",
    "TeamRandomizer",
    "partition",
]
