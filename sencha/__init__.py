"""Game-engine core: services, systems, batches, logging, vectors and rendering."""

__version__ = "0.1.0"