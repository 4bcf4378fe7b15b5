"""Runtime layer: HTTP transport and response helpers."""
