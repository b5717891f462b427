"""Data loading module for profile files."""

from .loaders import (
    load_profiles_csv,
    load_profiles_json,
    load_profile_pair,
    profiles_to_dataframe,
)

__all__ = [
    "load_profiles_csv",
    "load_profiles_json",
    "load_profile_pair",
    "profiles_to_dataframe",
]
