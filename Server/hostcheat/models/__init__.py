"""
Data Models Package

Contains all data models and schemas used throughout the application.
"""

from .game import Candidate, Feedback, GameMode, GameSession, GameState, GuessOutcome, LetterStatus

__all__ = ['Candidate', 'Feedback', 'GameMode', 'GameSession', 'GameState', 'GuessOutcome', 'LetterStatus']
