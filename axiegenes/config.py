"""Default paths and constants for gene decoding."""
from pathlib import Path

TRAITS_FILENAME = "traits.json"
PARTS_FILENAME = "parts.json"

# Layout names accepted on the command line
LAYOUT_CHOICES = ("auto", "compact", "extended")


def derive_traits_path(data_dir: Path) -> Path:
    """Trait dictionary path inside a data directory."""
    return data_dir / TRAITS_FILENAME


def derive_parts_path(data_dir: Path) -> Path:
    """Part registry path inside a data directory."""
    return data_dir / PARTS_FILENAME


def missing_data_files(data_dir: Path) -> list[Path]:
    """Return the data files that do not exist in ``data_dir``."""
    return [
        p for p in (derive_traits_path(data_dir), derive_parts_path(data_dir))
        if not p.is_file()
    ]
