"""
Data Models Package

Contains all data models used throughout the application.
"""

from .ladder import Difficulty, Ladder, WordPair

__all__ = ['Difficulty', 'Ladder', 'WordPair']
