"""
EEG Emotion - Emotional state estimation from raw EEG

A modular Python package that estimates physiological band powers from a
single-channel EEG window and classifies them into a discrete emotional state
for narrative-adaptation consumers.

Python: 3.10+
"""

__version__ = "1.0.0"

# Main package imports for easy access
from .core.data_types import (
    SampleWindow, BandPowerProfile, EmotionLabel, DecisionTier,
    EmotionState, EmotionDecision, EmotionReading,
)
from .acquisition.sources import FakeEEGSource, synthesize_signal
from .processing.features import SpectralBandAnalyzer
from .detection.emotion import EmotionClassifier
from .detection.mapper import EEGEmotionMapper

__all__ = [
    'SampleWindow', 'BandPowerProfile', 'EmotionLabel', 'DecisionTier',
    'EmotionState', 'EmotionDecision', 'EmotionReading',
    'FakeEEGSource', 'synthesize_signal',
    'SpectralBandAnalyzer', 'EmotionClassifier', 'EEGEmotionMapper',
]
