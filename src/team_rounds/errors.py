from __future__ import annotations


class TeamRoundsError(ValueError):
    """Base class for every input error reported by team_rounds."""


class InvalidConfiguration(TeamRoundsError):
    """Team shape, round count or search parameters cannot be satisfied."""


class EmptyPopulation(TeamRoundsError):
    """No participants were supplied."""
