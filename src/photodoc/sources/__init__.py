"""
Module: sources

Purpose:
    Image acquisition collaborators. Each source yields decoded images or
    a cancelled / permission-denied / failed outcome; the acquisition
    queue runs sources in the background and serializes delivery.

Key Classes:
    - ImageSource: Abstract acquisition source
    - InMemoryImageSource, FileImageSource: Concrete sources
    - AcquisitionResult, AcquisitionStatus: Outcome of one acquisition
    - AcquisitionQueue: Background runner with ordered delivery

Dependencies:
    - PIL: Image decoding

Used By:
    - photodoc.session
    - photodoc.cli
"""

from .base import (
    AcquisitionResult,
    AcquisitionStatus,
    ImageSource,
    InMemoryImageSource,
)
from .files import FileImageSource, DEFAULT_SELECTION_LIMIT
from .acquisition_queue import AcquisitionQueue

__all__ = [
    "AcquisitionResult",
    "AcquisitionStatus",
    "ImageSource",
    "InMemoryImageSource",
    "FileImageSource",
    "DEFAULT_SELECTION_LIMIT",
    "AcquisitionQueue",
]
