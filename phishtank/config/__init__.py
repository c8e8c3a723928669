"""Runtime configuration for the phishtank animation."""
