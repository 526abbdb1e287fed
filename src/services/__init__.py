"""
Presentation services for terminal snake: the terminal session and the
frame renderer.
"""
