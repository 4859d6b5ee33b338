"""appstate — typed domain primitives and a persisted, modular state registry."""

__version__ = "0.1.0"
