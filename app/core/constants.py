"""Core constants: cache key prefixes and shared literal values.

Single source of truth for cache key structure. Read paths that populate
the cache and write paths that invalidate it both build keys from these.
"""

# Cache key prefixes
CACHE_PREFIX_FEED = "feed"
CACHE_PREFIX_CATEGORIES = "categories"
CACHE_PREFIX_PROFILE = "profile"
CACHE_PREFIX_COMMENTS = "comments"
CACHE_PREFIX_PARENT = "parent"
CACHE_PREFIX_USER_ROLE = "user:role"

# Delimiter for composite keys
CACHE_KEY_SEP = ":"

# Glob characters understood by Redis MATCH; never allowed inside a key component.
CACHE_GLOB_CHARS = frozenset("*?[]")

# Delimiter between filter ids inside one key component (e.g. sorted category ids)
CACHE_LIST_SEP = ","

# Post / comment limits
MAX_FEED_PAGE_SIZE = 50
MAX_COMMENT_LENGTH = 500
MIN_USERNAME_LENGTH = 3

# Child passwords. bcrypt only reads the first 72 bytes.
MIN_PASSWORD_LENGTH = 6
MAX_PASSWORD_BYTES = 72

# Search
SEARCH_RESULT_LIMIT = 10
MAX_SEARCH_QUERY_LENGTH = 100

# XP rewards
XP_PER_POST = 10
XP_PER_LIKE = 5
XP_PER_COMMENT = 5
XP_PER_FOLLOW = 15

# Entity ids (cuid2 and similar). They appear in cache keys, so the separators
# and glob characters are excluded.
ENTITY_ID_REGEX = r"^[A-Za-z0-9_-]+$"
MAX_ENTITY_ID_LENGTH = 64
