"""
EEG data acquisition

This module provides synthetic sample windows for development and testing.
"""

from .sources import FakeEEGSource, synthesize_signal

__all__ = ['FakeEEGSource', 'synthesize_signal']
