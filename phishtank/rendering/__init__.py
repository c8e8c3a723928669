"""Drawing code; the pygame-backed modules are imported on demand."""
