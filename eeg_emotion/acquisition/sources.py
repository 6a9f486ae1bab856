"""
Synthetic EEG data sources

This module generates single-channel sample windows with controllable band
content, standing in for a live headset during development and testing.
"""

import logging
from typing import Optional, Sequence, Tuple

import numpy as np

from ..core.data_types import SampleWindow
from ..core.config import (
    FS_EXPECTED, FAKE_NOISE_STD, FAKE_STATE_PROFILES, STATE_CYCLE_SEC,
)


def synthesize_signal(components: Sequence[Tuple[float, float]], fs: float,
                      duration_sec: float, noise_std: float = 0.0,
                      rng: Optional[np.random.Generator] = None,
                      start_time: float = 0.0) -> np.ndarray:
    """
    Sum of sinusoids with optional Gaussian noise

    Args:
        components: (frequency Hz, amplitude) pairs
        fs: Sampling frequency (Hz)
        duration_sec: Signal duration (seconds)
        noise_std: Standard deviation of additive noise
        rng: Random generator used for the noise
        start_time: Time of the first sample (seconds)

    Returns:
        np.ndarray: int(duration_sec * fs) samples
    """
    n_samples = int(duration_sec * fs)
    t = start_time + np.arange(n_samples) / fs

    data = np.zeros(n_samples)
    for freq, amplitude in components:
        data += amplitude * np.sin(2 * np.pi * freq * t)

    if noise_std > 0:
        rng = rng if rng is not None else np.random.default_rng()
        data += rng.normal(0.0, noise_std, n_samples)

    return data


class FakeEEGSource:
    """
    Generate synthetic EEG windows for testing

    With ``state`` set, every window carries that state's band profile.
    Otherwise the source cycles through the profiles, switching every
    STATE_CYCLE_SEC seconds of synthetic time.
    """

    def __init__(self, fs: float = FS_EXPECTED, state: Optional[str] = None,
                 noise_std: float = FAKE_NOISE_STD, seed: Optional[int] = None):
        if state is not None and state not in FAKE_STATE_PROFILES:
            raise ValueError(f"Unknown synthetic state: {state!r} "
                             f"(expected one of {sorted(FAKE_STATE_PROFILES)})")
        self.fs = fs
        self.state = state
        self.noise_std = noise_std
        self.rng = np.random.default_rng(seed)
        self.time = 0.0
        self.state_cycle_time = STATE_CYCLE_SEC

    def current_state(self) -> str:
        """Synthetic state used for the next window"""
        if self.state is not None:
            return self.state
        names = list(FAKE_STATE_PROFILES)
        index = int(self.time // self.state_cycle_time) % len(names)
        return names[index]

    def generate_window(self, duration_sec: float) -> SampleWindow:
        """
        Generate one synthetic window

        Args:
            duration_sec: Duration of data to generate

        Returns:
            SampleWindow: int(duration_sec * fs) samples, timestamped in
            synthetic seconds since the source was created
        """
        state = self.current_state()
        samples = synthesize_signal(FAKE_STATE_PROFILES[state], self.fs, duration_sec,
                                    noise_std=self.noise_std, rng=self.rng,
                                    start_time=self.time)
        window = SampleWindow(samples=samples, fs=self.fs, timestamp=self.time)
        logging.debug(f"Synthetic window at t={self.time:.1f}s ({state}, {samples.size} samples)")

        self.time += duration_sec
        return window
