"""Building blocks for network services: byte buffers, varints, YAML configuration, HTTP message types and small containers."""

__version__ = "0.1.0"