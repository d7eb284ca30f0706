"""Unit tests.

Purpose
- Verify a single helper or class in isolation.

Guidelines
- No real I/O; loggers and sinks are in-process fakes or caplog.
- Layout mirrors ``src/stuff`` (``utils/`` tests live under ``unit/utils``).
"""
