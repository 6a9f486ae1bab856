"""
Core data types for EEG Emotion

This module defines the fundamental data structures used throughout the system
for representing sample windows, band powers, and emotional states.
"""

from dataclasses import dataclass, field, fields
from enum import Enum
from typing import Any, Dict

import numpy as np


@dataclass
class SampleWindow:
    """Container for a single-channel analysis window"""
    samples: np.ndarray       # Shape: (n_samples,)
    fs: float                 # Sampling frequency
    timestamp: float = 0.0    # Unix timestamp

    def __len__(self) -> int:
        return len(self.samples)

    @property
    def duration(self) -> float:
        if self.fs <= 0:
            return 0.0
        return len(self.samples) / self.fs


@dataclass
class BandPowerProfile:
    """Container for the five frequency band powers"""
    delta: float = 0.0
    theta: float = 0.0
    alpha: float = 0.0
    beta: float = 0.0
    gamma: float = 0.0

    @classmethod
    def zeros(cls) -> "BandPowerProfile":
        return cls()

    def as_dict(self) -> Dict[str, float]:
        return {f.name: float(getattr(self, f.name)) for f in fields(self)}

    def total(self) -> float:
        return self.delta + self.theta + self.alpha + self.beta + self.gamma


class EmotionLabel(str, Enum):
    """Discrete emotional states, in tie-break order"""
    FOCUSED_HIGH = "FOCUSED_HIGH"
    RELAXED_CALM = "RELAXED_CALM"
    ANXIOUS_STRESSED = "ANXIOUS_STRESSED"
    CURIOUS_INTERESTED = "CURIOUS_INTERESTED"


class DecisionTier(str, Enum):
    """Which branch of the classifier produced a state"""
    DOMINANCE = "dominance"
    WEIGHTED_SCORE = "weighted_score"


@dataclass(frozen=True)
class EmotionState:
    """Container for a classified emotional state"""
    primary: EmotionLabel
    intensity: float   # 0-1
    confidence: float  # 0-1


@dataclass(frozen=True)
class EmotionDecision:
    """
    Tagged classifier decision

    ``evidence`` holds the relative band fractions for the dominance tier
    and the four label scores for the weighted-score tier.
    """
    tier: DecisionTier
    state: EmotionState
    evidence: Dict[str, float] = field(default_factory=dict)


@dataclass
class EmotionReading:
    """Container for one processed window"""
    timestamp: float
    state: EmotionState
    band_powers: BandPowerProfile
    tier: DecisionTier

    def to_message(self) -> Dict[str, Any]:
        message = {
            "t": self.timestamp,
            "primary": self.state.primary.value,
            "intensity": float(self.state.intensity),
            "confidence": float(self.state.confidence),
            "tier": self.tier.value,
        }
        message.update(self.band_powers.as_dict())
        return message
