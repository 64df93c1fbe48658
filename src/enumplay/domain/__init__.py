"""Domain layer: closed value sets and the functions that match on them.

This layer depends only on the stdlib.
It must never import from services, output, commands, or config.
"""
