"""
MindPulse: mental-wellness tracking backend.

Users log moods, run guided self-help exercises, read community posts and
receive recommendations generated from their recent activity.
"""

__version__ = "0.1.0"
