"""
Core data types and structures for EEG Emotion

This module contains the fundamental data classes used throughout the system.
"""

from .data_types import (
    SampleWindow, BandPowerProfile, EmotionLabel, DecisionTier,
    EmotionState, EmotionDecision, EmotionReading,
)
from .config import *

__all__ = [
    'SampleWindow', 'BandPowerProfile', 'EmotionLabel', 'DecisionTier',
    'EmotionState', 'EmotionDecision', 'EmotionReading',
]
