"""Pipeline phases for the note-linking engine."""

from .autolink import KeywordAutoLinkPhase
from .backlinks import BacklinkPhase
from .bidirectional import BidirectionalPhase
from .extraction import LinkExtractionPhase
from .graph import GraphBuildPhase
from .indexing import NoteIndexPhase
from .ingestion import DocumentIngestionPhase
from .validation import ValidationAndQAPhase

__all__ = [
    "DocumentIngestionPhase",
    "NoteIndexPhase",
    "KeywordAutoLinkPhase",
    "LinkExtractionPhase",
    "BacklinkPhase",
    "BidirectionalPhase",
    "GraphBuildPhase",
    "ValidationAndQAPhase",
]
