"""
Alternate artist names.

Tags and lyrics sites often disagree on how an artist is spelled
("Guns N' Roses" vs "Guns N Roses", "P!nk" vs "Pink"). The resolver asks
this table for the spellings to try, in order, for a given artist.

The table is a YAML mapping from the name found in the tags to the
variants to try:

    "Guns N' Roses":
      - "Guns N' Roses"
      - "Guns N Roses"
      - "Guns and Roses"
    "P!nk": [Pink]

The canonical name is always one of the variants: when a configured list
omits it, it is tried first. Matching is exact and case-sensitive;
"guns n' roses" does not match the entry above.
"""

from pathlib import Path
from typing import Mapping

import yaml

from lyrics_explorer.core.exceptions import ResourceError
from lyrics_explorer.core.logger import get_logger

logger = get_logger(__name__)


class AlternateNames:
    """
    Read-only table of artist name variants.

    Example:
        names = AlternateNames({"P!nk": ["P!nk", "Pink"]})
        names.variants_for("P!nk")   # ("P!nk", "Pink")
        names.variants_for("Queen")  # ("Queen",)
    """

    def __init__(self, table: Mapping[str, list[str] | tuple[str, ...]] | None = None) -> None:
        self._table: dict[str, tuple[str, ...]] = {}
        for name, variants in (table or {}).items():
            variants = tuple(variants)
            if name not in variants:
                variants = (name,) + variants
            self._table[name] = variants

    def __len__(self) -> int:
        return len(self._table)

    def __contains__(self, artist: object) -> bool:
        return artist in self._table

    def variants_for(self, artist: str) -> tuple[str, ...]:
        """
        Return the artist name spellings to try, in order.

        Never empty: an artist missing from the table yields only its own name.
        """
        return self._table.get(artist, (artist,))

    @classmethod
    def load(cls, path: Path) -> "AlternateNames":
        """
        Load the table from a YAML file.

        Args:
            path: YAML file mapping a name to a list of variants. A plain
                  string value counts as a single variant. An empty file
                  gives an empty table.

        Raises:
            ResourceError: If the file cannot be read or is malformed.
        """
        try:
            with open(path, "r", encoding="utf-8") as f:
                raw_table = yaml.safe_load(f)
        except OSError as e:
            raise ResourceError(
                f"Failed to read alternate names file: {e}",
                details={"file_path": str(path), "original_error": str(e)}
            ) from e
        except yaml.YAMLError as e:
            raise ResourceError(
                f"Invalid YAML syntax in alternate names file: {e}",
                details={"file_path": str(path), "original_error": str(e)}
            ) from e

        if raw_table is None:
            raw_table = {}

        if not isinstance(raw_table, dict):
            raise ResourceError(
                "Alternate names file must contain a YAML dictionary",
                details={"file_path": str(path)}
            )

        table: dict[str, list[str]] = {}
        for name, variants in raw_table.items():
            if isinstance(variants, str):
                variants = [variants]
            if not isinstance(name, str) or not isinstance(variants, list) \
                    or not all(isinstance(variant, str) for variant in variants):
                raise ResourceError(
                    f"Invalid alternate names entry: {name!r}",
                    details={"file_path": str(path), "entry": str(name)}
                )
            table[name] = variants

        logger.debug(f"Loaded {len(table)} alternate name entries from {path}")
        return cls(table)
