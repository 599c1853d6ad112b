"""Rule-driven normalizer plugin."""
from urllib.parse import unquote_plus, urlsplit, urlunsplit

from mockhash.domain.entities.normalize_rules import NormalizeRules
from mockhash.domain.plugins.base import RequestNormalizer
from mockhash.infra.common import get_logger

logger = get_logger(__name__)


def _segment_key(segment: str) -> str:
    """Get the decoded key of a raw "key=value" query segment."""
    return unquote_plus(segment.split("=", 1)[0])


class RulesNormalizer(RequestNormalizer):
    """Normalizer configured from NormalizeRules (usually loaded from YAML)."""

    def __init__(self, rules: NormalizeRules):
        """Initialize normalizer with rules; plugin ID is the rules profile."""
        self._rules = rules
        self._dropped = set(rules.drop_query_params)

    @property
    def id(self) -> str:
        """Get plugin ID."""
        return self._rules.profile

    @property
    def rules(self) -> NormalizeRules:
        return self._rules

    def normalize_url(self, url: str) -> str:
        """
        Apply query and fragment rules to a URL.

        Kept query segments are left byte-for-byte as they appear in the URL,
        so dropping a param never re-encodes its neighbours.
        """
        parts = urlsplit(url)

        query = parts.query
        if self._rules.drop_query:
            query = ""
        elif self._dropped and query:
            query = "&".join(
                segment
                for segment in query.split("&")
                if segment and _segment_key(segment) not in self._dropped
            )

        fragment = "" if self._rules.drop_fragment else parts.fragment

        normalized = urlunsplit((parts.scheme, parts.netloc, parts.path, query, fragment))
        if normalized != url:
            logger.debug("Normalized %s -> %s", url, normalized)
        return normalized

    def use_body_in_hash(self, url: str) -> bool:
        return self._rules.use_body
