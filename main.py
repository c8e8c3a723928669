"""Entry point for the phishtank animation."""

import sys

from phishtank.config import settings
from phishtank.simulation import run


if __name__ == "__main__":
    runtime_settings = settings.load_runtime_settings(sys.argv[1:])
    settings.apply_runtime_settings(runtime_settings)
    run(runtime_settings)
