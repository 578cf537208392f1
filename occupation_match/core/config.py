import os
from pathlib import Path

from dotenv import load_dotenv

load_dotenv()

PACKAGE_ROOT = Path(__file__).resolve().parents[1]
DEFAULT_CATALOG_PATH = PACKAGE_ROOT / "data" / "job_scores.json"


class Settings:
    # Catalog source
    CATALOG_URL: str = os.getenv("CATALOG_URL", "")
    CATALOG_PATH: Path = Path(os.getenv("CATALOG_PATH", str(DEFAULT_CATALOG_PATH)))
    CATALOG_TIMEOUT: float = float(os.getenv("CATALOG_TIMEOUT", "10.0"))

    # Ranking
    SIMILARITY_POLICY: str = os.getenv("SIMILARITY_POLICY", "hybrid")
    WEIGHT_PROFILE: str = os.getenv("WEIGHT_PROFILE", "uniform")
    THRESHOLD_CUTOFF: float = float(os.getenv("THRESHOLD_CUTOFF", "0.2"))

    # Presentation
    RESULTS_PREVIEW_LIMIT: int = int(os.getenv("RESULTS_PREVIEW_LIMIT", "10"))


settings = Settings()
