"""Rule-driven plugins."""
from mockhash.infra.plugins.rules.normalizer import RulesNormalizer

__all__ = ["RulesNormalizer"]
