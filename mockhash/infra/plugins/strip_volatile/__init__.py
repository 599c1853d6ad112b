"""Strip-volatile plugins."""
from mockhash.infra.plugins.strip_volatile.normalizer import StripVolatileNormalizer
from mockhash.infra.plugins.registry import register_normalizer

register_normalizer(StripVolatileNormalizer())
