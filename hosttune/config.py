"""
Configuration management for hosttune.

Supports:
- TOML config files
- Command-line overrides
- Sensible defaults

Priority (highest to lowest):
1. Command-line arguments
2. Config file
3. Defaults
"""

from pathlib import Path
from dataclasses import dataclass, field
from typing import Optional, Dict, Any, List

try:
    import tomllib  # Python 3.11+
except ImportError:
    import tomli as tomllib


# Default config file locations (searched in order)
CONFIG_SEARCH_PATHS = [
    Path.cwd() / "hosttune.toml",
    Path.home() / ".config" / "hosttune" / "config.toml",
    Path.home() / ".hosttune" / "config.toml",
]

TUNING_MODES = ("direct", "script")
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR")


@dataclass
class SystemConfig:
    """Where the host lives and how long collaborator queries may take."""
    root: str = "/"
    timeout: float = 1.0


@dataclass
class TuningConfig:
    """Which tuners run and how their commands are applied."""
    mode: str = "direct"  # direct, script
    script_path: str = "./tune.sh"
    tuners: List[str] = field(default_factory=list)


@dataclass
class OutputConfig:
    """Output configuration."""
    json: bool = False
    quiet: bool = False
    log_level: str = "INFO"


@dataclass
class Config:
    """Main configuration container."""
    system: SystemConfig = field(default_factory=SystemConfig)
    tuning: TuningConfig = field(default_factory=TuningConfig)
    output: OutputConfig = field(default_factory=OutputConfig)

    # Source tracking
    _config_file: Optional[Path] = None

    @classmethod
    def load(cls, config_path: Optional[str] = None) -> "Config":
        """
        Load configuration from file.

        Args:
            config_path: Explicit path to config file. If None, searches default locations.

        Returns:
            Config instance with loaded values
        """
        config = cls()

        if config_path:
            path = Path(config_path)
            if not path.exists():
                raise FileNotFoundError(f"Config file not found: {config_path}")
        else:
            path = cls._find_config_file()

        if path:
            config = cls._load_from_file(path)
            config._config_file = path

        return config

    @classmethod
    def _find_config_file(cls) -> Optional[Path]:
        """Find config file in default locations."""
        for path in CONFIG_SEARCH_PATHS:
            if path.exists():
                return path
        return None

    @classmethod
    def _load_from_file(cls, path: Path) -> "Config":
        """Load config from TOML file."""
        with open(path, "rb") as f:
            data = tomllib.load(f)

        return cls._from_dict(data)

    @classmethod
    def _from_dict(cls, data: Dict[str, Any]) -> "Config":
        """Create Config from dictionary."""
        config = cls()

        if "system" in data:
            system = data["system"]
            config.system = SystemConfig(
                root=system.get("root", config.system.root),
                timeout=float(system.get("timeout", config.system.timeout)),
            )

        if "tuning" in data:
            tune = data["tuning"]
            config.tuning = TuningConfig(
                mode=tune.get("mode", config.tuning.mode),
                script_path=tune.get("script_path", config.tuning.script_path),
                tuners=tune.get("tuners", config.tuning.tuners),
            )

        if "output" in data:
            out = data["output"]
            config.output = OutputConfig(
                json=out.get("json", config.output.json),
                quiet=out.get("quiet", config.output.quiet),
                log_level=str(out.get("log_level", config.output.log_level)).upper(),
            )

        return config

    def override_from_args(self, args) -> "Config":
        """
        Override config values from argparse namespace.

        Args with value None are ignored (keeping config file values).
        """
        if getattr(args, "root", None):
            self.system.root = args.root
        if getattr(args, "timeout", None):
            self.system.timeout = args.timeout

        if getattr(args, "script", None):
            self.tuning.mode = "script"
            self.tuning.script_path = args.script
        if getattr(args, "tuners", None):
            self.tuning.tuners = list(args.tuners)

        if getattr(args, "json", None):
            self.output.json = True
        if getattr(args, "quiet", None):
            self.output.quiet = True
            self.output.log_level = "WARNING"
        if getattr(args, "verbose", None):
            self.output.log_level = "DEBUG"

        return self

    def validate(self) -> list:
        """
        Validate configuration.

        Returns:
            List of validation error messages (empty if valid)
        """
        errors = []

        if not Path(self.system.root).is_dir():
            errors.append(f"System root is not a directory: {self.system.root}")
        if self.system.timeout <= 0:
            errors.append("Timeout must be positive")

        if self.tuning.mode not in TUNING_MODES:
            errors.append(
                f"Unknown tuning mode '{self.tuning.mode}' (expected one of: {', '.join(TUNING_MODES)})"
            )
        if self.tuning.mode == "script" and not self.tuning.script_path:
            errors.append("Script mode requires a script path")
        if not isinstance(self.tuning.tuners, list) or not all(
            isinstance(name, str) for name in self.tuning.tuners
        ):
            errors.append(f"Tuners must be a list of names, got {self.tuning.tuners!r}")

        if self.output.log_level not in LOG_LEVELS:
            errors.append(f"Unknown log level '{self.output.log_level}'")

        return errors

    def summary(self, include_config_path: bool = True) -> str:
        """Generate human-readable config summary."""
        lines = []

        if include_config_path:
            if self._config_file:
                lines.append(f"Config: {self._config_file}")
            else:
                lines.append("Config: (defaults)")

        lines.append(f"Root: {self.system.root} (timeout {self.system.timeout}s)")

        if self.tuning.mode == "script":
            lines.append(f"Mode: script -> {self.tuning.script_path}")
        else:
            lines.append("Mode: direct")

        lines.append(f"Tuners: {', '.join(self.tuning.tuners) if self.tuning.tuners else '(all)'}")

        return "\n".join(lines)
