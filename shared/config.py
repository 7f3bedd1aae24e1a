"""
PassForge Configuration Management
===================================

Centralized configuration for PassForge using dataclasses and TOML-based
loading. Every section is optional in the TOML file; missing keys fall
back to the dataclass defaults.

Example ``passforge.toml``::

    [global]
    log_level = "INFO"

    [generator]
    default_length = 20
    use_symbols = true

    [breach]
    timeout = 3.0

References:
    - TOML v1.0.0 Specification. https://toml.io/en/v1.0.0
"""

from __future__ import annotations

import sys
from dataclasses import dataclass, field, asdict
from pathlib import Path
from typing import Any

if sys.version_info >= (3, 11):
    import tomllib
else:
    import tomli as tomllib


_DEFAULT_CONFIG_PATH: Path = Path(__file__).resolve().parent.parent / "passforge.toml"


# ========================== Section Configs ================================


@dataclass(frozen=False, slots=True)
class GeneratorConfig:
    """Defaults applied to charset-based and pronounceable generation."""

    default_length: int = 16
    use_upper: bool = True
    use_lower: bool = True
    use_digits: bool = True
    use_symbols: bool = False
    mix_keywords: bool = True
    pronounceable_length: int = 12
    default_pattern: str = "Cvccvc99!"


@dataclass(frozen=False, slots=True)
class PassphraseConfig:
    """Defaults for passphrase assembly."""

    word_count: int = 4
    separator: str = "-"
    capitalize: bool = True
    append_number: bool = False


@dataclass(frozen=False, slots=True)
class AnalyzerConfig:
    """Strength analyzer parameters.

    ``guesses_per_second`` models an offline attack against a fast hash
    on commodity GPU hardware.
    """

    guesses_per_second: float = 1e9


@dataclass(frozen=False, slots=True)
class BreachConfig:
    """Settings for the k-anonymity breach lookup."""

    api_url: str = "https://api.pwnedpasswords.com/range/"
    timeout: float = 5.0
    user_agent: str = "PassForge-Python"
    enabled: bool = True


@dataclass(frozen=False, slots=True)
class GlobalConfig:
    """Settings shared by every PassForge component."""

    log_level: str = "WARNING"
    log_file: str = ""
    log_json: bool = False
    output_format: str = "console"
    batch_limit: int = 1000
    version: str = "1.0.0"


# =========================== Master Config =================================


@dataclass(frozen=False, slots=True)
class ForgeConfig:
    """Master configuration aggregating all sections.

    Usage:
        >>> config = ForgeConfig.load()                    # default path
        >>> config = ForgeConfig.load("custom.toml")       # custom path
        >>> config.passphrase.separator
        '-'
    """

    global_settings: GlobalConfig = field(default_factory=GlobalConfig)
    generator: GeneratorConfig = field(default_factory=GeneratorConfig)
    passphrase: PassphraseConfig = field(default_factory=PassphraseConfig)
    analyzer: AnalyzerConfig = field(default_factory=AnalyzerConfig)
    breach: BreachConfig = field(default_factory=BreachConfig)

    @classmethod
    def load(cls, path: str | Path | None = None) -> ForgeConfig:
        """Load configuration from a TOML file.

        If *path* is ``None`` the loader looks for ``passforge.toml`` in the
        project root and falls back to pure defaults when it is absent.

        Raises:
            FileNotFoundError: If an explicitly supplied path does not exist.
        """
        config_path = Path(path) if path is not None else _DEFAULT_CONFIG_PATH

        if not config_path.exists():
            if path is not None:
                raise FileNotFoundError(
                    f"Configuration file not found: {config_path}"
                )
            return cls()

        with open(config_path, "rb") as fh:
            raw: dict[str, Any] = tomllib.load(fh)

        return cls(
            global_settings=cls._build_section(GlobalConfig, raw.get("global", {})),
            generator=cls._build_section(GeneratorConfig, raw.get("generator", {})),
            passphrase=cls._build_section(PassphraseConfig, raw.get("passphrase", {})),
            analyzer=cls._build_section(AnalyzerConfig, raw.get("analyzer", {})),
            breach=cls._build_section(BreachConfig, raw.get("breach", {})),
        )

    def to_dict(self) -> dict[str, Any]:
        """Serialise the configuration tree to a plain dictionary."""
        return asdict(self)

    @staticmethod
    def _build_section(cls: type, data: dict[str, Any]) -> Any:
        """Instantiate dataclass *cls* from the keys it declares.

        Unknown keys are ignored so newer config files keep loading.
        """
        valid_keys = {f.name for f in cls.__dataclass_fields__.values()}  # type: ignore[attr-defined]
        filtered = {k: v for k, v in data.items() if k in valid_keys}
        return cls(**filtered)


def get_config(path: str | Path | None = None) -> ForgeConfig:
    """Module-level wrapper around :meth:`ForgeConfig.load`.

    Caches the result so that repeated calls share one instance.
    """
    if not hasattr(get_config, "_cached") or path is not None:
        get_config._cached = ForgeConfig.load(path)  # type: ignore[attr-defined]
    return get_config._cached  # type: ignore[attr-defined]
