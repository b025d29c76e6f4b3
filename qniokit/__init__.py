"""Building blocks for network I/O: base64, FIFO queues, I/O vectors, socket endpoints, JSON trees, ring buffers, backoff and reader-writer locks."""

__version__ = "0.1.0"