"""Project-wide defaults for agentmd.

Plain module-level constants.  Per-domain overrides live in YAML profiles
(see :mod:`agentmd.profiles`); CLI flags override both.
"""

from __future__ import annotations

# ---------------------------------------------------------------------------
# Conversion defaults
# ---------------------------------------------------------------------------
DEFAULT_SOURCE = "document"

# 0 (or any value <= 0) disables chunking
DEFAULT_CHUNK_SIZE = 0

DETECT_LANGUAGE = False

# ---------------------------------------------------------------------------
# Link canonicalization
# ---------------------------------------------------------------------------
# Query keys starting (case-insensitively) with one of these are dropped,
# e.g. "ref" also covers Twitter's "ref_src"
TRACKING_PARAM_PREFIXES: tuple[str, ...] = (
    "utm_",
    "fbclid",
    "gclid",
    "msclkid",
    "ref",
    "source",
    "campaign",
    "medium",
    "content",
    "term",
)

# ---------------------------------------------------------------------------
# Social sources
# ---------------------------------------------------------------------------
SOCIAL_HOSTS: frozenset[str] = frozenset(
    {
        "twitter.com",
        "www.twitter.com",
        "mobile.twitter.com",
        "x.com",
        "www.x.com",
        "nitter.net",
        "www.nitter.net",
    },
)

DEFAULT_PLATFORM = "twitter"

# ---------------------------------------------------------------------------
# Logging
# ---------------------------------------------------------------------------
LOG_LEVEL = "WARNING"
LOG_FORMAT = "%(asctime)s [%(name)s] %(levelname)s: %(message)s"
