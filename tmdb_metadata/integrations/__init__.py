"""
External system integrations.

The TMDb transport lives under `tmdb_metadata.integrations.tmdb` so it stays
decoupled from the resolution pipeline in `tmdb_metadata.resolver`.
"""
