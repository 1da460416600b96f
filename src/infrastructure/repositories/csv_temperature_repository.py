"""CSV-backed temperature repository for measured monthly means."""

import logging
from pathlib import Path
from typing import Dict, List, Optional
import pandas as pd
from ...domain.entities.monthly_temperature import MONTHS_PER_YEAR, MonthlyTemperatureProfile
from ...domain.repositories.temperature_repository import TemperatureRepository

logger = logging.getLogger(__name__)

REQUIRED_COLUMNS = {"zone", "month", "mean_temp"}


class CsvTemperatureRepository(TemperatureRepository):
    """
    Repository for monthly means exported to a long-format CSV.

    Expected columns: zone, month (1-12), mean_temp (Celsius). Several rows
    for the same zone and month are averaged, so daily or yearly exports can
    be loaded directly.
    """

    def __init__(self, data_file: str):
        """
        Initialize repository.

        Args:
            data_file: Path to CSV file with monthly temperature data
        """
        self.data_file = Path(data_file)
        if not self.data_file.exists():
            raise FileNotFoundError(f"Temperature data file not found: {data_file}")

        self._profiles = self._load_from_file()

    def _load_from_file(self) -> Dict[str, MonthlyTemperatureProfile]:
        """Load and validate profiles from the CSV file."""
        logger.info(f"Loading monthly temperatures from {self.data_file}")

        try:
            df = pd.read_csv(self.data_file)
        except Exception as e:
            logger.error(f"Error reading CSV file: {e}")
            raise

        missing = REQUIRED_COLUMNS - set(df.columns)
        if missing:
            raise ValueError(f"Temperature data missing required columns: {sorted(missing)}")

        df = df.dropna(subset=["zone", "month", "mean_temp"]).copy()

        for col in ["month", "mean_temp"]:
            numeric = pd.to_numeric(df[col], errors="coerce")
            bad = df.loc[numeric.isna(), col]
            if not bad.empty:
                raise ValueError(
                    f"Temperature data has non-numeric {col} values: {sorted(set(map(str, bad)))}"
                )
            df[col] = numeric

        fractional = df[df["month"] % 1 != 0]
        if not fractional.empty:
            raise ValueError(
                f"Temperature data has non-integer months: "
                f"{sorted(fractional['month'].unique().tolist())}"
            )
        df["month"] = df["month"].astype(int)

        out_of_range = df[(df["month"] < 1) | (df["month"] > MONTHS_PER_YEAR)]
        if not out_of_range.empty:
            raise ValueError(
                f"Temperature data has months outside 1-{MONTHS_PER_YEAR}: "
                f"{sorted(out_of_range['month'].unique().tolist())}"
            )

        # One column per month, one row per zone
        pivot = df.pivot_table(index="zone", columns="month", values="mean_temp", aggfunc="mean")
        pivot = pivot.reindex(columns=range(1, MONTHS_PER_YEAR + 1))

        incomplete = pivot[pivot.isna().any(axis=1)].index.tolist()
        if incomplete:
            raise ValueError(f"Zones without all {MONTHS_PER_YEAR} months: {incomplete}")

        profiles = {
            str(zone): MonthlyTemperatureProfile.from_sequence(
                str(zone), [round(float(v), 1) for v in row.tolist()]
            )
            for zone, row in pivot.iterrows()
        }

        logger.info(f"Loaded temperature profiles for {len(profiles)} zones")
        return profiles

    def list_zones(self) -> List[str]:
        return list(self._profiles.keys())

    def get_profile(self, zone: str) -> Optional[MonthlyTemperatureProfile]:
        return self._profiles.get(zone)
