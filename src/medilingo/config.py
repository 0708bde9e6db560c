# medilingo/config.py
from __future__ import annotations
import os

# Logging
LOG_LEVEL = os.getenv("MEDILINGO_LOG_LEVEL", "WARNING").upper()

# Length bounds enforced by the command-line shell (the core has none)
MIN_INSTRUCTION_LENGTH = int(os.getenv("MEDILINGO_MIN_LENGTH", "3"))
MAX_INSTRUCTION_LENGTH = int(os.getenv("MEDILINGO_MAX_LENGTH", "200"))
