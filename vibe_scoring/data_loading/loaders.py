"""
Profile loading from files.

Profiles arrive from the profile provider; these loaders read them from
CSV or JSON for batch scoring, the CLI and distribution analysis. Values
are validated (and clamped into [0, 1]) by Profile itself.
"""

import json
import logging
from pathlib import Path
from typing import Any, Dict, List, Tuple

import pandas as pd

from ..profiles.schema import Profile

logger = logging.getLogger(__name__)

ID_COLUMNS = ("profile_id", "id", "username")


def load_profiles_csv(filepath: str, delimiter: str = ",") -> List[Profile]:
    """
    Load profiles from a CSV file.

    The file needs one identifier column (profile_id, id or username) and
    one column per known dimension. Empty cells are unknown dimensions.

    Args:
        filepath: Path to the CSV file
        delimiter: Field delimiter

    Returns:
        List of profiles in file order

    Raises:
        FileNotFoundError: If the file doesn't exist
        ValueError: If the file is empty or has no identifier column
    """
    path = Path(filepath)
    if not path.exists():
        raise FileNotFoundError(f"Profile file not found: {filepath}")

    logger.info(f"Loading profiles from {filepath} (delimiter: {repr(delimiter)})")
    df = pd.read_csv(path, sep=delimiter)

    if df.empty:
        raise ValueError(f"Profile file is empty: {filepath}")

    id_column = next((c for c in ID_COLUMNS if c in df.columns), None)
    if id_column is None:
        raise ValueError(f"Profile file needs one of the columns {list(ID_COLUMNS)}: {filepath}")

    df[id_column] = df[id_column].astype(str)
    dimension_columns = [c for c in df.columns if c != id_column]
    # NaN -> None so that missing cells become unknown dimensions
    df = df.astype(object).where(pd.notna(df), None)

    profiles = [
        Profile(
            profile_id=row[id_column],
            dimensions={col: row[col] for col in dimension_columns},
        )
        for row in df.to_dict(orient="records")
    ]

    logger.info(f"Loaded {len(profiles)} profiles with {len(dimension_columns)} dimension columns")
    return profiles


def load_profiles_json(filepath: str) -> List[Profile]:
    """
    Load profiles from a JSON file.

    Accepts a list of profile objects or {"profiles": [...]}; each profile
    object is read with Profile.from_dict.

    Raises:
        FileNotFoundError: If the file doesn't exist
        ValueError: If the file has no profiles
    """
    path = Path(filepath)
    if not path.exists():
        raise FileNotFoundError(f"Profile file not found: {filepath}")

    logger.info(f"Loading profiles from {filepath}")
    with open(path, "r", encoding="utf-8") as f:
        data = json.load(f)

    records = _profile_records(data)
    if not records:
        raise ValueError(f"No profiles found in {filepath}")

    profiles = [Profile.from_dict(record) for record in records]
    logger.info(f"Loaded {len(profiles)} profiles")
    return profiles


def load_profile_pair(filepath: str) -> Tuple[Profile, Profile]:
    """
    Load exactly two profiles from a JSON or CSV file.

    Raises:
        ValueError: If the file does not contain exactly two profiles
    """
    if Path(filepath).suffix.lower() == ".csv":
        profiles = load_profiles_csv(filepath)
    else:
        profiles = load_profiles_json(filepath)

    if len(profiles) != 2:
        raise ValueError(f"Expected exactly 2 profiles in {filepath}, found {len(profiles)}")
    return profiles[0], profiles[1]


def profiles_to_dataframe(profiles: List[Profile]) -> pd.DataFrame:
    """One row per profile, indexed by profile_id, NaN for unknown dimensions."""
    rows = [{"profile_id": p.profile_id, **p.dimensions} for p in profiles]
    return pd.DataFrame(rows).set_index("profile_id").astype(float)


def _profile_records(data: Any) -> List[Dict[str, Any]]:
    if isinstance(data, dict) and "profiles" in data:
        data = data["profiles"]
    if not isinstance(data, list):
        raise ValueError("Profile JSON must be a list or an object with a 'profiles' list")
    return data
