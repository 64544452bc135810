"""Configuration layer — config models, file discovery, settings, logging."""
