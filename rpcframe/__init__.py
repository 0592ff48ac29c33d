"""JSON-RPC 2.0 request, response and batch message objects, with an example dispatcher."""

__version__ = "0.1.0"