from handnotes.transcription.base import BaseTranscriber
from handnotes.transcription.factory import TranscriberFactory
from handnotes.transcription.transcriber import Transcriber

__all__ = ["BaseTranscriber", "Transcriber", "TranscriberFactory"]
