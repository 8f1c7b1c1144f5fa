from .encoder_service import DTMFEncoderService
from .synthesizer import nibbles_from_bytes, nibbles_from_text, synthesize
from .validation import validate_request
from .wav_writer import write_wav

__all__ = [
    "DTMFEncoderService",
    "nibbles_from_bytes",
    "nibbles_from_text",
    "synthesize",
    "validate_request",
    "write_wav",
]
