"""
Solo Bounce: one-player terminal pong.
"""

__version__ = "0.1.0"
