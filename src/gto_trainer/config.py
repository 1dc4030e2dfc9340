"""Configuration loading from environment variables and defaults."""

import os
from pathlib import Path

from dotenv import load_dotenv

# Load .env file if it exists
env_path = Path(__file__).parent.parent.parent / ".env"
if env_path.exists():
    load_dotenv(dotenv_path=env_path)

# Drill defaults
DEFAULT_POSITION = os.getenv("GTO_TRAINER_DEFAULT_POSITION", "UTG")
DEFAULT_ROUNDS = int(os.getenv("GTO_TRAINER_ROUNDS", "20"))

# Seconds to pause after a correct answer before the next hand
AUTO_ADVANCE_DELAY = float(os.getenv("GTO_TRAINER_AUTO_ADVANCE", "1.0"))

# Fixed seed for hand draws (unset = shared random source)
_seed = os.getenv("GTO_TRAINER_SEED", "")
SEED = int(_seed) if _seed else None

LOG_LEVEL = os.getenv("GTO_TRAINER_LOG_LEVEL", "WARNING").upper()
