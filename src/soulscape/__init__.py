"""
Soulscape

Emotion scoring and self-harm risk detection for free-text journal entries.
"""

__version__ = "0.1.0"
