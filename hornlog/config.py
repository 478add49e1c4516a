"""
HornLog Configuration System

Manages configuration for tokenizing and resolving rules: interactive
tokenizing, the prefix table used to shorten IRIs, and logging settings.
Supports both YAML and JSON formats.
"""

import json
from dataclasses import asdict, dataclass, field
from pathlib import Path
from typing import Any, Dict, Optional, Union

import yaml


@dataclass
class TokenizerConfig:
    """Tokenizer settings"""
    interactive: bool = False  # Report truncated rule text as incomplete


@dataclass
class ResolverConfig:
    """Identifier resolver settings"""
    prefixes: Dict[str, str] = field(default_factory=dict)  # Prefix label -> namespace IRI
    default_namespace: Optional[str] = None  # Namespace shown without a prefix


@dataclass
class HornLogConfig:
    """Main HornLog configuration"""
    tokenizer: TokenizerConfig = field(default_factory=TokenizerConfig)
    resolver: ResolverConfig = field(default_factory=ResolverConfig)

    # Logging
    log_level: str = "INFO"
    log_file: Optional[str] = None

    @classmethod
    def load(cls, path: Optional[Union[str, Path]] = None) -> "HornLogConfig":
        """
        Load configuration from file.

        Args:
            path: Path to config file. If None, searches for:
                  1. ~/.hornlog/config.yaml (or .yml)
                  2. ~/.hornlog/config.json
                  3. ./hornlog_config.yaml (or .yml)
                  4. ./hornlog_config.json

        Returns:
            HornLogConfig instance
        """
        if path:
            return cls._load_from_file(Path(path))

        search_paths = [
            Path.home() / ".hornlog" / "config.yaml",
            Path.home() / ".hornlog" / "config.yml",
            Path.home() / ".hornlog" / "config.json",
            Path("hornlog_config.yaml"),
            Path("hornlog_config.yml"),
            Path("hornlog_config.json"),
        ]

        for config_path in search_paths:
            if config_path.exists():
                return cls._load_from_file(config_path)

        # Return default config if no file found
        return cls()

    @classmethod
    def _load_from_file(cls, path: Path) -> "HornLogConfig":
        """Load config from specific file"""
        with open(path, 'r') as f:
            if path.suffix in ['.yaml', '.yml']:
                data = yaml.safe_load(f)
            else:
                data = json.load(f)

        return cls.from_dict(data or {})

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "HornLogConfig":
        """Create config from dictionary"""
        config = cls()

        if 'tokenizer' in data:
            config.tokenizer = TokenizerConfig(**data['tokenizer'])

        if 'resolver' in data:
            config.resolver = ResolverConfig(**data['resolver'])

        for key in ['log_level', 'log_file']:
            if key in data:
                setattr(config, key, data[key])

        return config

    def save(self, path: Union[str, Path]) -> None:
        """
        Save configuration to file.

        Args:
            path: Path to save config (extension determines format)
        """
        path = Path(path)
        path.parent.mkdir(parents=True, exist_ok=True)

        data = self.to_dict()

        with open(path, 'w') as f:
            if path.suffix in ['.yaml', '.yml']:
                yaml.dump(data, f, default_flow_style=False, sort_keys=False)
            else:
                json.dump(data, f, indent=2)

    def to_dict(self) -> Dict[str, Any]:
        """Convert config to dictionary"""
        return {
            'tokenizer': asdict(self.tokenizer),
            'resolver': asdict(self.resolver),
            'log_level': self.log_level,
            'log_file': self.log_file,
        }


# Global config instance
_config: Optional[HornLogConfig] = None


def get_config() -> HornLogConfig:
    """Get the global config instance"""
    global _config
    if _config is None:
        _config = HornLogConfig.load()
    return _config


def set_config(config: HornLogConfig) -> None:
    """Set the global config instance"""
    global _config
    _config = config


def reset_config() -> None:
    """Reset to default config"""
    global _config
    _config = None
