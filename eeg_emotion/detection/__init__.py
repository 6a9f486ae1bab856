"""
Emotional state detection

This module implements the two-tier emotion classifier and the pipeline
that feeds it from raw sample windows.
"""

from .emotion import EmotionClassifier
from .mapper import EEGEmotionMapper

__all__ = ['EmotionClassifier', 'EEGEmotionMapper']
