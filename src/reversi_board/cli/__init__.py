"""Command-line entry point and interactive console session."""
