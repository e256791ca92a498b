"""Routing — path template compilation and first-match-wins dispatch.

Routes are registered during setup and frozen into an immutable
ordered table before requests are served.
"""
