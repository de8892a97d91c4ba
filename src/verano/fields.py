"""Canonical dictionary keys and namespace prefixes.

Keep these in one place so producers and consumers of request and response
dictionaries agree on the flat-key layout.
"""

METHOD = "method"
PATH = "path"
URI = "uri"
STATUS = "status"
REASON_PHRASE = "reason-phrase"
BODY = "body"

RESERVED_KEYS = (METHOD, PATH, URI, STATUS, REASON_PHRASE, BODY)

HEADERS_PREFIX = "h."
QUERY_PREFIX = "q."
