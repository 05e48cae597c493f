# ==============================================
# Configuration Management
# ==============================================
#
# PURPOSE:
#   Load and validate all configuration from environment
#   variables / .env file. Provides typed config objects
#   to the parser, the analyzers and the CLI.
#
# CLASSES:
# --------
# - ParserConfig (dataclass)
#     encoding: str              (default "utf-8-sig")
#     type_inference: bool       (default True)
#     trim_headers: bool         (default True)
#     skip_empty_lines: bool     (default True)
#
# - ReviewScaleConfig (dataclass)
#     score_min / score_max / score_step              (default -3, 3, 0.25)
#     recommend_min / recommend_max / recommend_step  (default 0, 1, 0.1)
#
# - ComparableRates (dataclass)
#     years: list[int]                    (2010 .. 2018)
#     series: dict[str, list[float]]      (past acceptance rates per track)
#
# - AppConfig (dataclass)
#     parser: ParserConfig
#     review_scale: ReviewScaleConfig
#     comparable_rates: ComparableRates
#     http_timeout_seconds: float         (default 30.0)
#
# FUNCTION:
# ---------
# - get_config() -> AppConfig
#     Load .env using python-dotenv, construct AppConfig.
#     Returns the same singleton on repeated calls.
#
# USAGE:
# ------
#   from confstats.config import get_config
#   config = get_config()
#   print(config.parser.encoding)
#   print(config.comparable_rates.years)
#
# ==============================================

import json
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Optional

from dotenv import load_dotenv


# Past acceptance rates published on the JCDL website (2010-2017).
# The 2018 slot is filled by the rate computed from the uploaded export.
DEFAULT_COMPARABLE_YEARS = [2010, 2011, 2012, 2013, 2014, 2015, 2016, 2017, 2018]
DEFAULT_COMPARABLE_SERIES = {
    "Full Papers": [0.29, 0.28, 0.27, 0.29, 0.29, 0.30, 0.29, 0.30],
    "Short Papers": [0.29, 0.37, 0.31, 0.31, 0.32, 0.50, 0.35, 0.32],
}


@dataclass
class ParserConfig:
    """CSV decoding and type inference options."""
    encoding: str = "utf-8-sig"
    type_inference: bool = True
    trim_headers: bool = True
    skip_empty_lines: bool = True


@dataclass
class ReviewScaleConfig:
    """Histogram ranges for the review score and best-paper recommendation."""
    score_min: float = -3.0
    score_max: float = 3.0
    score_step: float = 0.25
    recommend_min: float = 0.0
    recommend_max: float = 1.0
    recommend_step: float = 0.1


@dataclass
class ComparableRates:
    """
    Historical acceptance rates that this year's tracks are charted against.

    Only tracks that appear in `series` get this year's rate appended.
    """
    years: List[int] = field(default_factory=lambda: list(DEFAULT_COMPARABLE_YEARS))
    series: Dict[str, List[float]] = field(
        default_factory=lambda: {k: list(v) for k, v in DEFAULT_COMPARABLE_SERIES.items()}
    )

    def to_dict(self) -> Dict[str, Any]:
        """
        Build a fresh chart payload: {"year": [...], "<track>": [...], ...}.

        Lists are copied so callers may extend them without touching
        the configured reference data.
        """
        payload: Dict[str, Any] = {"year": list(self.years)}
        for track_name, rates in self.series.items():
            payload[track_name] = list(rates)
        return payload

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "ComparableRates":
        """
        Reconstruct reference data from the chart payload format.

        Args:
            data: Dictionary with a "year" list and one rate list per track

        Returns:
            A ComparableRates instance
        """
        if "year" not in data:
            raise ValueError("Comparable rates require a 'year' list")
        years = [int(year) for year in data["year"]]
        series = {
            str(name): [float(rate) for rate in rates]
            for name, rates in data.items()
            if name != "year"
        }
        return cls(years=years, series=series)

    @classmethod
    def from_file(cls, path: Path) -> "ComparableRates":
        """Load reference data from a JSON file in the chart payload format."""
        with open(path, "r", encoding="utf-8") as f:
            return cls.from_dict(json.load(f))


@dataclass
class AppConfig:
    """Main application configuration."""
    parser: ParserConfig
    review_scale: ReviewScaleConfig
    comparable_rates: ComparableRates
    http_timeout_seconds: float = 30.0


# Singleton instance
_config_instance: Optional[AppConfig] = None


def _env_flag(name: str, default: bool) -> bool:
    value = os.getenv(name)
    if value is None or value.strip() == "":
        return default
    return value.strip().lower() in ("1", "true", "yes", "on")


def get_config() -> AppConfig:
    """
    Load configuration from environment variables / .env file.
    Returns the same singleton instance on repeated calls.

    Returns:
        AppConfig: Application configuration
    """
    global _config_instance

    if _config_instance is not None:
        return _config_instance

    # Load .env file from project root
    env_path = Path(__file__).parent.parent / ".env"
    load_dotenv(dotenv_path=env_path)

    parser_config = ParserConfig(
        encoding=os.getenv("CONFSTATS_ENCODING", "utf-8-sig"),
        type_inference=_env_flag("CONFSTATS_TYPE_INFERENCE", True),
    )

    # Reference data: built-in table unless a JSON file overrides it
    rates_file = os.getenv("CONFSTATS_COMPARABLE_RATES_FILE")
    if rates_file:
        comparable_rates = ComparableRates.from_file(Path(rates_file))
    else:
        comparable_rates = ComparableRates()

    _config_instance = AppConfig(
        parser=parser_config,
        review_scale=ReviewScaleConfig(),
        comparable_rates=comparable_rates,
        http_timeout_seconds=float(os.getenv("CONFSTATS_HTTP_TIMEOUT", "30.0")),
    )

    return _config_instance


def reset_config() -> None:
    """Drop the cached singleton so the next get_config() re-reads the environment."""
    global _config_instance
    _config_instance = None
