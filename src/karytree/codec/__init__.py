"""Codecs that read messages out of a tree."""

from .message import MessageCodec, decode

__all__ = ["MessageCodec", "decode"]
