from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

# Load .env from project root
load_dotenv(Path(__file__).resolve().parent.parent.parent / ".env")

TIE_BREAK_CATALOG = "catalog"
TIE_BREAK_NAME = "name"


@dataclass(frozen=True)
class MatchingConfig:
    """
    Ranking settings.

    ``tie_break`` decides the order of breeds with equal totals: ``"catalog"``
    keeps the order the catalog supplied them in, ``"name"`` sorts them by
    breed name.
    """

    top_n: int = int(os.getenv("BREEDMATCH_TOP_N", "10"))
    tie_break: str = os.getenv("BREEDMATCH_TIE_BREAK", TIE_BREAK_CATALOG)


DEFAULT_MATCHING_CONFIG = MatchingConfig()
