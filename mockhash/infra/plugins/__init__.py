"""Built-in request normalizer plugins."""
import mockhash.infra.plugins.identity  # noqa: F401
import mockhash.infra.plugins.strip_volatile  # noqa: F401
