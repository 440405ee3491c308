"""
Scenes package for Solo Bounce.
"""
