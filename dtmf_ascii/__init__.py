"""Encode text as DTMF beeps in a mono 16-bit PCM WAV file."""

__version__ = "0.1.0"
