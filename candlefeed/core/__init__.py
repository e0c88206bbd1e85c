"""candlefeed core: models, pipeline, cache, providers and services."""
