"""Small web services: voting, ideas, notes, uploads, leaderboards, names and pack sharing."""

__version__ = "0.1.0"