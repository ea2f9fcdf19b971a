from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path

from dotenv import load_dotenv

# Load .env from project root
load_dotenv(Path(__file__).resolve().parent.parent.parent / ".env")

_BUNDLED_CATALOG = Path(__file__).resolve().parent.parent / "data" / "breeds.csv"


@dataclass(frozen=True)
class CatalogConfig:
    """
    Location of the breed catalog dataset.

    Defaults to the CSV bundled with the package; set ``BREEDMATCH_CATALOG_PATH``
    to point at another file with the same columns.
    """

    catalog_path: Path = field(
        default_factory=lambda: Path(os.getenv("BREEDMATCH_CATALOG_PATH", str(_BUNDLED_CATALOG)))
    )


DEFAULT_CATALOG_CONFIG = CatalogConfig()
