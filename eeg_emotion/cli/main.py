"""
Main CLI entry point for EEG Emotion

This module provides the command-line interface and the processing loops
that turn recorded or synthetic EEG into JSON emotion readings.
"""

import argparse
import json
import logging
import signal
import sys
from threading import Event
from typing import Iterator, List, Optional

import numpy as np

from ..core.config import *
from ..core.data_types import SampleWindow
from ..acquisition.sources import FakeEEGSource
from ..detection.mapper import EEGEmotionMapper


def iter_windows(samples: np.ndarray, fs: float, window_sec: float) -> Iterator[SampleWindow]:
    """
    Slice a recording into consecutive non-overlapping windows

    A trailing partial window is dropped.
    """
    n_window = int(window_sec * fs)
    if n_window <= 0:
        return
    for start in range(0, samples.size - n_window + 1, n_window):
        yield SampleWindow(samples=samples[start:start + n_window], fs=fs,
                           timestamp=start / fs)


def load_csv_samples(path: str, column: int = 0, delimiter: str = ",",
                     skip_header: int = 0) -> np.ndarray:
    """Load one column of a CSV recording as a float array"""
    data = np.loadtxt(path, delimiter=delimiter, skiprows=skip_header, ndmin=2)
    if column >= data.shape[1]:
        raise ValueError(f"Column {column} out of range ({data.shape[1]} columns in {path})")
    return data[:, column]


def emit(reading, out=None) -> None:
    out = out if out is not None else sys.stdout
    out.write(json.dumps(reading.to_message()) + "\n")
    out.flush()


def run_csv_analysis(path: str, mapper: EEGEmotionMapper, fs: float, window_sec: float,
                     column: int = 0, delimiter: str = ",", skip_header: int = 0) -> int:
    """
    Analyze a CSV recording window by window

    Returns:
        int: number of windows processed
    """
    samples = load_csv_samples(path, column, delimiter, skip_header)
    logging.info(f"Loaded {samples.size} samples from {path} ({samples.size / fs:.1f}s @ {fs} Hz)")

    count = 0
    for window in iter_windows(samples, fs, window_sec):
        emit(mapper.process(window))
        count += 1

    if count == 0:
        logging.warning(f"Recording shorter than one {window_sec}s window - nothing to analyze")
    return count


def run_realtime_processing(source: FakeEEGSource, mapper: EEGEmotionMapper,
                            window_sec: float, max_windows: Optional[int] = None,
                            realtime: bool = False) -> int:
    """
    Synthetic real-time processing loop

    Pulls windows from the source, classifies them and prints one JSON reading
    per window until max_windows is reached or a shutdown signal arrives.

    Returns:
        int: number of windows processed
    """
    logging.info("Starting real-time processing...")

    shutdown_event = Event()
    def signal_handler(signum, frame):
        logging.info("Shutdown signal received")
        shutdown_event.set()

    previous_handlers = {}
    for signum in (signal.SIGINT, signal.SIGTERM):
        try:
            previous_handlers[signum] = signal.signal(signum, signal_handler)
        except ValueError:
            # Not on the main thread; rely on max_windows to stop
            pass

    count = 0
    try:
        while not shutdown_event.is_set():
            if max_windows is not None and count >= max_windows:
                break

            window = source.generate_window(window_sec)
            reading = mapper.process(window)
            emit(reading)
            count += 1

            if realtime:
                shutdown_event.wait(window_sec)
    finally:
        for signum, handler in previous_handlers.items():
            signal.signal(signum, handler)
        logging.info(f"Real-time processing stopped after {count} windows")

    return count


def create_parser() -> argparse.ArgumentParser:
    """Create command line argument parser"""
    parser = argparse.ArgumentParser(
        description="EEG Emotion - band power based emotional state estimation",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Analyze a recording (one sample per row, 256 Hz)
  python -m eeg_emotion --csv data/session.csv --fs 256

  # Run on synthetic data cycling through all states
  python -m eeg_emotion --run --windows 20

  # Synthetic focused signal, paced in real time
  python -m eeg_emotion --run --state focused --realtime
        """
    )

    # Mode selection (mutually exclusive)
    mode_group = parser.add_mutually_exclusive_group(required=True)
    mode_group.add_argument("--csv",
                           help="Analyze a CSV recording")
    mode_group.add_argument("--run", action="store_true",
                           help="Run processing on synthetic EEG")

    # CSV options
    parser.add_argument("--column", type=int, default=0,
                       help="CSV column holding the EEG channel (default: 0)")
    parser.add_argument("--delimiter", default=",",
                       help="CSV delimiter (default: ',')")
    parser.add_argument("--skip-header", type=int, default=0,
                       help="Number of header rows to skip (default: 0)")

    # Synthetic options
    parser.add_argument("--state", choices=sorted(FAKE_STATE_PROFILES),
                       help="Pin the synthetic state (default: cycle through all)")
    parser.add_argument("--windows", type=int, default=None,
                       help="Stop after this many windows (default: run until Ctrl+C)")
    parser.add_argument("--realtime", action="store_true",
                       help="Pace synthetic windows at wall-clock speed")
    parser.add_argument("--seed", type=int, default=None,
                       help="Random seed for synthetic noise")

    # Processing parameters
    parser.add_argument("--fs", type=float, default=FS_EXPECTED,
                       help=f"Sampling frequency (default: {FS_EXPECTED})")
    parser.add_argument("--window-sec", type=float, default=WINDOW_SEC,
                       help=f"Analysis window length in seconds (default: {WINDOW_SEC})")
    parser.add_argument("--method", choices=SPECTRAL_METHODS, default=SPECTRAL_METHOD,
                       help=f"Spectral estimation method (default: {SPECTRAL_METHOD})")

    # Logging
    parser.add_argument("--verbose", "-v", action="store_true",
                       help="Enable verbose logging")

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point"""
    parser = create_parser()
    args = parser.parse_args(argv)

    # Setup logging
    log_level = logging.DEBUG if args.verbose else logging.INFO
    logging.basicConfig(
        level=log_level,
        format='%(asctime)s - %(levelname)s - %(message)s',
        datefmt='%H:%M:%S',
        stream=sys.stderr,
    )

    if args.fs <= 0 or args.window_sec <= 0:
        logging.error("--fs and --window-sec must be positive")
        return 1

    mapper = EEGEmotionMapper(method=args.method)

    try:
        if args.csv is not None:
            run_csv_analysis(args.csv, mapper, args.fs, args.window_sec,
                             column=args.column, delimiter=args.delimiter,
                             skip_header=args.skip_header)
            return 0

        elif args.run:
            logging.info("Using synthetic EEG data")
            source = FakeEEGSource(args.fs, state=args.state, seed=args.seed)
            run_realtime_processing(source, mapper, args.window_sec,
                                    max_windows=args.windows, realtime=args.realtime)
            return 0

    except KeyboardInterrupt:
        logging.info("Interrupted by user")
        return 0
    except (OSError, ValueError) as e:
        logging.error(f"Failed to process recording: {e}")
        return 1

    return 1


if __name__ == "__main__":
    sys.exit(main())
