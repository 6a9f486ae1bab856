"""
EEG band power extraction

This module estimates the power present in each physiological frequency band
of a single-channel sample window. The spectrum is Hann-windowed, each band's
DFT bins are evaluated, and the mean magnitude-squared value is square-rooted
to compress the dynamic range handed to the classifier.
"""

import logging
import math
from typing import Sequence, Tuple, Union

import numpy as np
from scipy import fft as sp_fft
from scipy.signal import windows as sp_windows

from ..core.data_types import SampleWindow, BandPowerProfile
from ..core.config import FREQ_BANDS, SPECTRAL_METHOD, SPECTRAL_METHODS

ArrayLike = Union[np.ndarray, Sequence[float]]


class SpectralBandAnalyzer:
    """
    Estimate band powers from a raw sample window

    ``method="direct"`` evaluates each DFT bin by summation over the window,
    which is cheap for the short windows this system targets. ``method="fft"``
    computes the same coefficients with a real FFT for longer windows; both
    share the windowing, bin selection and amplitude compression.
    """

    def __init__(self, method: str = SPECTRAL_METHOD):
        if method not in SPECTRAL_METHODS:
            raise ValueError(f"Unknown spectral method: {method!r} "
                             f"(expected one of {SPECTRAL_METHODS})")
        self.method = method

    @staticmethod
    def bin_range(n_samples: int, sample_rate: float,
                  freq_range: Tuple[float, float]) -> Tuple[int, int]:
        """
        Inclusive DFT bin range covering a frequency band

        Returns:
            Tuple[k_start, k_end]: empty when k_end <= k_start
        """
        f_per_bin = sample_rate / n_samples
        k_start = max(1, math.floor(freq_range[0] / f_per_bin))
        k_end = min(math.floor(freq_range[1] / f_per_bin), n_samples // 2)
        return k_start, k_end

    def _bin_power(self, windowed: np.ndarray, k_start: int, k_end: int) -> np.ndarray:
        """Normalized magnitude-squared DFT coefficients for bins k_start..k_end"""
        n = windowed.size

        if self.method == "fft":
            coeffs = sp_fft.rfft(windowed)[k_start:k_end + 1]
            re, im = coeffs.real, coeffs.imag
        else:
            # One row per bin, O(N) memory
            index = np.arange(n)
            re = np.empty(k_end - k_start + 1)
            im = np.empty_like(re)
            for i, k in enumerate(range(k_start, k_end + 1)):
                angles = (2.0 * np.pi * k / n) * index
                re[i] = np.cos(angles) @ windowed
                im[i] = -(np.sin(angles) @ windowed)

        return (re * re + im * im) / (n * n)

    def _band_power(self, windowed: np.ndarray, sample_rate: float,
                    freq_range: Tuple[float, float]) -> float:
        k_start, k_end = self.bin_range(windowed.size, sample_rate, freq_range)
        if k_end <= k_start:
            return 0.0

        avg_power = float(np.mean(self._bin_power(windowed, k_start, k_end)))
        return math.sqrt(avg_power)

    def _prepare(self, samples: ArrayLike, sample_rate: float):
        """
        Validate input and apply the Hann window

        Returns:
            np.ndarray or None: windowed samples, None for degenerate input
        """
        try:
            data = np.asarray(samples, dtype=np.float64).ravel()
            rate = float(sample_rate)
        except (TypeError, ValueError) as e:
            logging.error(f"Band power extraction failed: {e}")
            return None

        if data.size == 0 or not math.isfinite(rate) or rate <= 0:
            return None

        if not np.all(np.isfinite(data)):
            logging.warning("Non-finite samples in window - reporting zero band power")
            return None

        # Symmetric Hann: 0.5 * (1 - cos(2*pi*n / (N-1)))
        return data * sp_windows.hann(data.size, sym=True)

    def compute_band_power(self, samples: ArrayLike, sample_rate: float,
                           freq_range: Tuple[float, float]) -> float:
        """
        Extract power in a single frequency band

        Args:
            samples: Raw samples for a single channel
            sample_rate: Sampling frequency (Hz)
            freq_range: (low_freq, high_freq) in Hz, half-open

        Returns:
            float: Square root of the mean bin power, 0.0 for degenerate input
        """
        windowed = self._prepare(samples, sample_rate)
        if windowed is None:
            return 0.0
        return self._band_power(windowed, float(sample_rate), freq_range)

    def compute_band_powers(self, samples: ArrayLike, sample_rate: float) -> BandPowerProfile:
        """
        Extract all five band powers from a sample window

        Args:
            samples: Raw samples for a single channel
            sample_rate: Sampling frequency (Hz)

        Returns:
            BandPowerProfile: every band present, all zero for degenerate input
        """
        powers = BandPowerProfile.zeros()

        windowed = self._prepare(samples, sample_rate)
        if windowed is None:
            return powers

        rate = float(sample_rate)
        for band_name, freq_range in FREQ_BANDS.items():
            setattr(powers, band_name, self._band_power(windowed, rate, freq_range))

        logging.debug(f"Band powers ({windowed.size} samples @ {rate} Hz): {powers}")
        return powers

    def analyze_window(self, window: SampleWindow) -> BandPowerProfile:
        """Extract band powers from a SampleWindow using its own sample rate"""
        return self.compute_band_powers(window.samples, window.fs)
