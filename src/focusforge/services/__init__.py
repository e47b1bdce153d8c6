"""Service layer for FocusForge.

Services hold the component logic (timer, task board, stats panel, points)
and talk to storage through the repository interfaces.
"""
