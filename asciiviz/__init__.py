"""ASCII music visualizers, a particle system, audio result codes and an output plugin interface."""

__version__ = "0.1.0"