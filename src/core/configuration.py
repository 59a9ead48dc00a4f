"""Loading Life configurations from text files.

Named configurations live in src/configurations/<name>.txt. Files use the
plain text format read by World.load_from_configuration.
"""

import logging
from pathlib import Path
from typing import List, Optional, Union

from .rules import RuleParams
from .world import World

logger = logging.getLogger(__name__)

CONFIGURATIONS_DIR = Path(__file__).resolve().parent.parent / "configurations"


def list_configurations(directory: Optional[Path] = None) -> List[str]:
    """List the names of available configurations (file stems, sorted)."""
    directory = Path(directory) if directory is not None else CONFIGURATIONS_DIR
    if not directory.is_dir():
        return []
    return sorted(path.stem for path in directory.glob("*.txt"))


def resolve_configuration_path(name: str, directory: Optional[Path] = None) -> Path:
    """Find the file for a named configuration.

    Args:
        name: Configuration name without extension
        directory: Directory to search (bundled configurations by default)

    Returns:
        Path to the configuration file

    Raises:
        FileNotFoundError: If no such configuration exists
    """
    directory = Path(directory) if directory is not None else CONFIGURATIONS_DIR
    path = directory / f"{name}.txt"
    if not path.is_file():
        available = ", ".join(list_configurations(directory)) or "none"
        raise FileNotFoundError(f"Unknown configuration '{name}' (available: {available})")
    return path


def load_configuration_file(path: Union[str, Path],
                            dead_char: str = '.',
                            alive_char: str = '*',
                            rule_params: Optional[RuleParams] = None) -> World:
    """Read a configuration file into a ready-to-step world.

    Args:
        path: Configuration file
        dead_char: Character marking a dead cell
        alive_char: Character marking a live cell
        rule_params: Rule parameters for the new world

    Returns:
        World with the pattern in its active buffer

    Raises:
        FileNotFoundError: If the file does not exist
        ConfigurationParseError: If the file contains an unrecognised character
    """
    path = Path(path)
    data = path.read_text(encoding="utf-8")

    world = World.load_from_configuration(data, dead_char, alive_char, rule_params)
    world.swap_and_clear()

    logger.info(f"Loaded {path.name}: {world.live_count()} live cells")
    return world


def load_named_configuration(name: str,
                             dead_char: str = '.',
                             alive_char: str = '*',
                             directory: Optional[Path] = None) -> World:
    """Load a named configuration into a ready-to-step world."""
    return load_configuration_file(resolve_configuration_path(name, directory), dead_char, alive_char)
