"""Shared types, request encoding and microphone profiles for GoXLR mixers."""

__version__ = "0.1.0"