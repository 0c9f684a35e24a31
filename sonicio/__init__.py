"""Audio sample formats, stream configuration, timing, sample buffers and host/device/stream interfaces."""

__version__ = "0.1.0"

__all__ = ["config", "data", "sample_format", "timing", "traits"]