"""
Configuration constants for EEG Emotion

This module contains the fixed frequency band partition and every tunable
heuristic of the emotion classifier. Processing settings can be overridden
from the command line; the band partition cannot.
"""

from typing import Dict, Tuple

# ============================================================================
# PROCESSING CONFIGURATION
# ============================================================================

FS_EXPECTED = 256                 # Default sampling rate (Hz)
WINDOW_SEC = 2.0                  # Analysis window duration (seconds)
SPECTRAL_METHOD = "direct"        # "direct" (DFT summation) or "fft"
SPECTRAL_METHODS = ("direct", "fft")

# Frequency Bands (Hz), half-open [low, high), ascending
FREQ_BANDS: Dict[str, Tuple[float, float]] = {
    "delta": (0.5, 4.0),
    "theta": (4.0, 8.0),
    "alpha": (8.0, 13.0),
    "beta": (13.0, 30.0),
    "gamma": (30.0, 100.0),
}

# ============================================================================
# CLASSIFIER CONFIGURATION - Tier A (dominance rule on relative power)
# ============================================================================

DOMINANCE_THRESHOLD = 0.6         # r.beta + r.gamma must exceed this
ANXIOUS_GAMMA_THRESHOLD = 0.55    # r.gamma above this ...
ANXIOUS_ALPHA_CEILING = 0.2       # ... with r.alpha below this -> anxious
EPSILON = 1e-6                    # Denominator guard

# Secondary band weight in Tier A intensity
ANXIOUS_BETA_WEIGHT = 0.5
FOCUSED_GAMMA_WEIGHT = 0.3
CURIOUS_ALPHA_WEIGHT = 0.3

# ============================================================================
# CLASSIFIER CONFIGURATION - Tier B (weighted score on absolute power)
# ============================================================================

LABEL_ORDER = (
    "FOCUSED_HIGH",
    "RELAXED_CALM",
    "ANXIOUS_STRESSED",
    "CURIOUS_INTERESTED",
)

SCORE_WEIGHTS: Dict[str, Dict[str, float]] = {
    "FOCUSED_HIGH": {"beta": 0.5, "alpha": 0.2, "gamma": 0.3},
    "RELAXED_CALM": {"alpha": 0.6, "theta": 0.3, "beta": -0.2},
    "ANXIOUS_STRESSED": {"beta": 0.6, "alpha": -0.3, "gamma": 0.2},
    "CURIOUS_INTERESTED": {"gamma": 0.5, "alpha": 0.3, "theta": 0.2},
}

# ============================================================================
# SYNTHETIC SOURCE CONFIGURATION
# ============================================================================

STATE_CYCLE_SEC = 10.0            # Switch synthetic state every 10 seconds
FAKE_NOISE_STD = 0.05             # Gaussian noise added to synthetic windows

# (frequency Hz, amplitude) components per synthetic state
FAKE_STATE_PROFILES: Dict[str, Tuple[Tuple[float, float], ...]] = {
    "focused": ((20.0, 0.8), (40.0, 0.6)),
    "relaxed": ((10.0, 1.0), (6.0, 0.4)),
    "anxious": ((45.0, 1.0), (18.0, 0.2)),
    "curious": ((40.0, 1.0), (20.0, 0.3), (10.0, 0.12)),
}
