import math
import tracemalloc

import numpy as np
import pytest

from eeg_emotion.core.config import FREQ_BANDS
from eeg_emotion.core.data_types import BandPowerProfile, SampleWindow
from eeg_emotion.processing.features import SpectralBandAnalyzer

FS = 256


def sine(freq: float, fs: float = FS, seconds: float = 2.0, amplitude: float = 1.0) -> np.ndarray:
    n = int(fs * seconds)
    return amplitude * np.sin(2 * np.pi * freq * np.arange(n) / fs)


@pytest.fixture(scope="module")
def analyzer() -> SpectralBandAnalyzer:
    return SpectralBandAnalyzer()


def test_beta_sine_dominates_beta_band(analyzer: SpectralBandAnalyzer) -> None:
    bands = analyzer.compute_band_powers(sine(15), FS)
    assert bands.beta > bands.alpha
    assert bands.beta > bands.theta


def test_alpha_sine_dominates_alpha_band(analyzer: SpectralBandAnalyzer) -> None:
    bands = analyzer.compute_band_powers(sine(10), FS)
    assert bands.alpha > bands.beta
    assert bands.alpha > bands.theta


@pytest.mark.parametrize("freq, band", [(2.0, "delta"), (6.0, "theta"), (40.0, "gamma")])
def test_sine_power_lands_in_its_band(analyzer: SpectralBandAnalyzer, freq: float, band: str) -> None:
    powers = analyzer.compute_band_powers(sine(freq), FS).as_dict()
    assert max(powers, key=powers.get) == band


def test_powers_are_finite_and_non_negative(analyzer: SpectralBandAnalyzer) -> None:
    rng = np.random.default_rng(7)
    for fs in (64, 128, 250, 256, 512):
        samples = rng.normal(0.0, 3.0, int(fs * 1.5))
        for value in analyzer.compute_band_powers(samples, fs).as_dict().values():
            assert math.isfinite(value)
            assert value >= 0.0


def test_every_band_present(analyzer: SpectralBandAnalyzer) -> None:
    powers = analyzer.compute_band_powers(sine(10), FS).as_dict()
    assert list(powers) == list(FREQ_BANDS)


@pytest.mark.parametrize("samples, rate", [
    ([], FS),
    (np.array([]), FS),
    (sine(10), 0),
    (sine(10), -256),
    (sine(10), float("nan")),
])
def test_degenerate_input_gives_zero_profile(analyzer: SpectralBandAnalyzer, samples, rate) -> None:
    assert analyzer.compute_band_powers(samples, rate) == BandPowerProfile.zeros()


def test_non_finite_samples_give_zero_profile(analyzer: SpectralBandAnalyzer) -> None:
    samples = sine(10)
    samples[5] = np.nan
    assert analyzer.compute_band_powers(samples, FS) == BandPowerProfile.zeros()


def test_unconvertible_samples_give_zero_profile(analyzer: SpectralBandAnalyzer) -> None:
    assert analyzer.compute_band_powers(["a", "b", "c"], FS) == BandPowerProfile.zeros()


def test_single_sample_is_zero(analyzer: SpectralBandAnalyzer) -> None:
    assert analyzer.compute_band_powers([1.0], FS) == BandPowerProfile.zeros()


def test_short_window_leaves_narrow_bands_empty(analyzer: SpectralBandAnalyzer) -> None:
    # 8 samples at 256 Hz -> 32 Hz per bin, only gamma spans a bin
    powers = analyzer.compute_band_powers(sine(64, seconds=8 / FS), FS)
    assert powers.delta == 0.0
    assert powers.theta == 0.0
    assert powers.alpha == 0.0
    assert powers.beta == 0.0
    assert powers.gamma > 0.0


def test_bin_range() -> None:
    assert SpectralBandAnalyzer.bin_range(512, 256, FREQ_BANDS["delta"]) == (1, 8)
    assert SpectralBandAnalyzer.bin_range(512, 256, FREQ_BANDS["beta"]) == (26, 60)
    assert SpectralBandAnalyzer.bin_range(512, 256, FREQ_BANDS["gamma"]) == (60, 200)
    # gamma capped at Nyquist
    assert SpectralBandAnalyzer.bin_range(256, 128, FREQ_BANDS["gamma"]) == (60, 128)


def test_matches_reference_summation(analyzer: SpectralBandAnalyzer) -> None:
    samples = sine(20, amplitude=0.8) + sine(6, amplitude=0.3)
    n = samples.size
    window = 0.5 * (1 - np.cos(2 * np.pi * np.arange(n) / (n - 1)))
    windowed = samples * window

    k_start, k_end = SpectralBandAnalyzer.bin_range(n, FS, FREQ_BANDS["beta"])
    total = 0.0
    for k in range(k_start, k_end + 1):
        re = sum(windowed[i] * math.cos(2 * math.pi * k * i / n) for i in range(n))
        im = -sum(windowed[i] * math.sin(2 * math.pi * k * i / n) for i in range(n))
        total += (re * re + im * im) / (n * n)
    expected = math.sqrt(total / (k_end - k_start + 1))

    assert analyzer.compute_band_powers(samples, FS).beta == pytest.approx(expected, rel=1e-9)


def test_fft_method_agrees_with_direct() -> None:
    rng = np.random.default_rng(3)
    samples = sine(12) + sine(33, amplitude=0.4) + rng.normal(0.0, 0.2, 2 * FS)
    direct = SpectralBandAnalyzer("direct").compute_band_powers(samples, FS).as_dict()
    fast = SpectralBandAnalyzer("fft").compute_band_powers(samples, FS).as_dict()
    for band in FREQ_BANDS:
        assert fast[band] == pytest.approx(direct[band], rel=1e-9, abs=1e-12)


def test_unknown_method_rejected() -> None:
    with pytest.raises(ValueError):
        SpectralBandAnalyzer("welch")


def test_single_band_matches_profile(analyzer: SpectralBandAnalyzer) -> None:
    samples = sine(10) + sine(25, amplitude=0.5)
    profile = analyzer.compute_band_powers(samples, FS)
    assert analyzer.compute_band_power(samples, FS, FREQ_BANDS["alpha"]) == profile.alpha
    assert analyzer.compute_band_power(samples, FS, (20.0, 10.0)) == 0.0


def test_analyze_window_uses_window_rate(analyzer: SpectralBandAnalyzer) -> None:
    samples = sine(15, fs=128, seconds=4.0)
    window = SampleWindow(samples=samples, fs=128, timestamp=12.5)
    assert analyzer.analyze_window(window) == analyzer.compute_band_powers(samples, 128)


def test_list_and_2d_input_accepted(analyzer: SpectralBandAnalyzer) -> None:
    samples = sine(10)
    expected = analyzer.compute_band_powers(samples, FS)
    assert analyzer.compute_band_powers(samples.tolist(), FS) == expected
    assert analyzer.compute_band_powers(samples[np.newaxis, :], FS) == expected


def test_input_not_modified(analyzer: SpectralBandAnalyzer) -> None:
    samples = sine(10)
    original = samples.copy()
    analyzer.compute_band_powers(samples, FS)
    np.testing.assert_array_equal(samples, original)


def test_band_table_is_fixed() -> None:
    with pytest.raises(TypeError):
        SpectralBandAnalyzer(freq_bands={"mu": (8.0, 12.0)})

    powers = SpectralBandAnalyzer().compute_band_powers(sine(10), FS)
    assert set(vars(powers)) == set(FREQ_BANDS)
    assert powers.alpha > 0.0


def test_long_window_direct_matches_fft_in_bounded_memory() -> None:
    samples = sine(10, seconds=30.0) + sine(22, seconds=30.0, amplitude=0.5)
    fast = SpectralBandAnalyzer("fft").compute_band_powers(samples, FS).as_dict()

    tracemalloc.start()
    try:
        direct = SpectralBandAnalyzer("direct").compute_band_powers(samples, FS).as_dict()
        _, peak = tracemalloc.get_traced_memory()
    finally:
        tracemalloc.stop()

    # 7680 samples; a dense bins x samples matrix would need hundreds of MB
    assert peak < 5 * 1024 * 1024
    for band in FREQ_BANDS:
        assert direct[band] == pytest.approx(fast[band], rel=1e-6, abs=1e-9)
