"""Centralized configuration loading."""
import os
import yaml
import importlib
from pathlib import Path
from typing import Optional
from dotenv import load_dotenv
from pydantic import ValidationError

from mockhash.domain.entities.app_config import AppConfig
from mockhash.domain.entities.normalize_rules import NormalizeRules
from mockhash.infra.common.errors import ConfigError


ENVIRONMENTS = ("local", "staging", "production")


def _load_env_file() -> None:
    """Load environment variables from .env file if it exists."""
    env_path = Path(__file__).parent.parent.parent.parent / ".env"
    if env_path.exists():
        load_dotenv(env_path, override=False)
    else:
        load_dotenv(override=False)


def load_app_config(env: Optional[str] = None) -> AppConfig:
    """
    Load application configuration for environment.
    
    Args:
        env: Environment name (local, staging, production). 
             If None, reads from ENV environment variable.
        
    Returns:
        AppConfig instance
        
    Raises:
        ConfigError: If config module not found or invalid
    """
    _load_env_file()
    
    if env is None:
        env = os.getenv("ENV", "local")
    
    if env not in ENVIRONMENTS:
        raise ConfigError(f"Invalid environment: {env}. Must be one of: {', '.join(ENVIRONMENTS)}")
    
    module_name = f"config.appconfig.{env}"
    try:
        config_module = importlib.import_module(module_name)
    except ImportError as e:
        raise ConfigError(f"Config module not found: {module_name}") from e
    except ValidationError as e:
        raise ConfigError(f"Invalid app config in {module_name}: {e}") from e
    
    config = getattr(config_module, "config", None)
    if not isinstance(config, AppConfig):
        raise ConfigError(f"Config module {module_name} does not define an AppConfig named 'config'")
    return config


def load_normalize_rules(profile: str, config_path: Optional[str] = None) -> NormalizeRules:
    """
    Load normalization rules from YAML.
    
    Args:
        profile: Rules profile name
        config_path: Optional path to rules file. If None, looks in config/normalizers/ directory.
        
    Returns:
        Validated NormalizeRules
        
    Raises:
        ConfigError: If rules file is not found or invalid
    """
    if config_path is None:
        local_path = Path("config/normalizers") / f"{profile}.yml"
        if local_path.exists():
            config_path = str(local_path)
        else:
            package_root = Path(__file__).parent.parent.parent.parent
            absolute_path = package_root / "config" / "normalizers" / f"{profile}.yml"
            if absolute_path.exists():
                config_path = str(absolute_path)
            else:
                raise ConfigError(
                    f"Rules not found for profile '{profile}'. "
                    f"Tried: {local_path} and {absolute_path}."
                )
    
    try:
        with open(config_path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except FileNotFoundError as e:
        raise ConfigError(f"Rules file not found: {config_path}") from e
    except yaml.YAMLError as e:
        raise ConfigError(f"Invalid YAML in rules file: {config_path}") from e
    
    if isinstance(data, list):
        profile_data = None
        for item in data:
            if isinstance(item, dict) and item.get("profile") == profile:
                profile_data = item
                break
        if profile_data is None:
            raise ConfigError(f"Profile {profile} not found in rules file")
        data = profile_data
    
    if not isinstance(data, dict):
        raise ConfigError(f"Rules file must contain a mapping or a list of mappings: {config_path}")
    
    data.setdefault("profile", profile)
    try:
        return NormalizeRules(**data)
    except ValidationError as e:
        raise ConfigError(f"Invalid normalize rules: {e}") from e
