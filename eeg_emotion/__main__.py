"""
Main entry point for EEG Emotion package

This allows running the package with: python -m eeg_emotion
"""

import sys

from .cli.main import main

if __name__ == "__main__":
    sys.exit(main())
