"""Runtime state container for CLI context."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict

from rich.console import Console

from gymcalc.core.cache import CalculationCache


@dataclass
class CLIState:
    """CLI runtime options, loaded configuration and calculation cache."""

    json_output: bool
    plain_output: bool
    verbose: bool
    quiet: bool
    config_path: Path
    config: Dict[str, Any]
    console: Console
    cache: CalculationCache = field(default_factory=CalculationCache)

    def debug(self, message: str) -> None:
        """Print a diagnostic line when running with --verbose."""
        if self.verbose and not self.json_output:
            self.console.log(message)
