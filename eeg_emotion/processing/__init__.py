"""
EEG signal processing components

This module contains the spectral band power extraction used ahead of
emotional state classification.
"""

from .features import SpectralBandAnalyzer

__all__ = ['SpectralBandAnalyzer']
