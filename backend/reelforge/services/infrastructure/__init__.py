"""Infrastructure services - parsing utilities shared by the pipeline stages."""
