"""Domain layer — the unit value type, parser, and hierarchy algebra.

This layer depends only on stdlib and the configuration models.
It must never import from the settings or logging modules.
"""
