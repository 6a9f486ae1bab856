"""
EEG to emotion mapping pipeline

Runs band power extraction and emotion classification back to back on a
sample window, producing a timestamped reading for downstream consumers.
"""

from typing import Optional

from ..core.data_types import BandPowerProfile, EmotionReading, EmotionState, SampleWindow
from ..core.config import SPECTRAL_METHOD
from ..processing.features import ArrayLike, SpectralBandAnalyzer
from .emotion import EmotionClassifier


class EEGEmotionMapper:
    """Map raw EEG sample windows to emotional states"""

    def __init__(self, method: str = SPECTRAL_METHOD,
                 classifier: Optional[EmotionClassifier] = None):
        self.analyzer = SpectralBandAnalyzer(method)
        self.classifier = classifier if classifier is not None else EmotionClassifier()

    def analyze_frequency_bands(self, samples: ArrayLike, sample_rate: float) -> BandPowerProfile:
        return self.analyzer.compute_band_powers(samples, sample_rate)

    def map_to_emotional_state(self, profile: BandPowerProfile) -> EmotionState:
        return self.classifier.classify(profile)

    def process(self, window: SampleWindow) -> EmotionReading:
        """
        Analyze one window end to end

        Args:
            window: Single-channel sample window

        Returns:
            EmotionReading: state, band powers, and deciding tier
        """
        powers = self.analyzer.analyze_window(window)
        decision = self.classifier.decide(powers)
        return EmotionReading(
            timestamp=window.timestamp,
            state=decision.state,
            band_powers=powers,
            tier=decision.tier,
        )
