"""Ties the roster, the partitioner and persistence together."""

import logging
import random
from typing import Optional, Tuple

from .config import Config
from .partitioner import TeamAssignment, partition
from .persistence import PersistenceBridge
from .roster import RosterStore

logger = logging.getLogger(__name__)


class TeamRandomizer:
    """Main class for managing a roster and drawing random teams from it."""

    def __init__(self, config: Config, bridge: PersistenceBridge, rng: Optional[random.Random] = None):
        """Initialize the randomizer and hydrate the roster from storage.

        The snapshot is loaded exactly once, here. From then on every roster
        change is saved and discards the current team assignment.

        Args:
            config: Configuration object with roster and team settings
            bridge: Persistence bridge for the roster snapshot
            rng: Random source for shuffling
        """
        self.config = config
        self.bridge = bridge
        self.rng = rng
        self.roster = RosterStore(max_name_length=config.max_name_length)
        self.assignment: Optional[TeamAssignment] = None

        snapshot = bridge.load_snapshot()
        if snapshot is not None:
            self.roster.hydrate(snapshot)
            logger.debug("Loaded %d members from storage", len(self.roster))

        self.roster.subscribe(self._on_roster_change)

    def randomize(self, team_count: Optional[int] = None) -> TeamAssignment:
        """Draw a fresh team assignment from the current roster.

        Args:
            team_count: Number of teams, defaults to the configured default

        Returns:
            The new assignment, also kept as ``self.assignment``
        """
        if team_count is None:
            team_count = self.config.default_team_count

        self.assignment = partition(
            self.roster.snapshot(),
            team_count,
            rng=self.rng,
            revision=self.roster.revision,
        )
        return self.assignment

    def current_assignment(self) -> Optional[TeamAssignment]:
        """Return the current assignment unless the roster changed since."""
        if self.assignment is not None and self.assignment.is_stale(self.roster.revision):
            self.assignment = None
        return self.assignment

    def _on_roster_change(self, snapshot: Tuple[str, ...]) -> None:
        self.assignment = None
        self.bridge.save_snapshot(snapshot)
