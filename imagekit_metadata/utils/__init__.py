"""Utility functions for the ImageKit metadata client."""

from .decoding import decode, decode_json
from .http import ApiResponse, build_request, send

__all__ = ["ApiResponse", "build_request", "decode", "decode_json", "send"]
