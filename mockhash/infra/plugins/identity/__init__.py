"""Identity plugins."""
from mockhash.infra.plugins.identity.normalizer import IdentityNormalizer
from mockhash.infra.plugins.registry import register_normalizer

register_normalizer(IdentityNormalizer())
