"""Chat adapter for a locally running Ollama daemon."""

__version__ = "0.1.0"
