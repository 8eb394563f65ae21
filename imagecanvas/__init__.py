"""Square-canvas image normalization service."""
