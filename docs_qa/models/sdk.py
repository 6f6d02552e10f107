"""
SDK identifiers.

Known SDK variants a documentation page can be written for. Requests naming
an SDK outside this set are treated as naming none.

Dependencies: enum (stdlib)
System role: SDK enum shared by the corpus, API and CLI
"""

from enum import Enum


class SDK(str, Enum):
    """Documentation SDK variant."""

    NEXTJS = "nextjs"
    REACT = "react"
    JS_FRONTEND = "js-frontend"
    CHROME_EXTENSION = "chrome-extension"
    EXPO = "expo"
    ANDROID = "android"
    IOS = "ios"
    EXPRESSJS = "expressjs"
    FASTIFY = "fastify"
    REACT_ROUTER = "react-router"
    REMIX = "remix"
    TANSTACK_REACT_START = "tanstack-react-start"
    GO = "go"
    ASTRO = "astro"
    NUXT = "nuxt"
    VUE = "vue"
    RUBY = "ruby"
    JS_BACKEND = "js-backend"


VALID_SDKS: frozenset[str] = frozenset(sdk.value for sdk in SDK)


def parse_sdk(value: object) -> str | None:
    """
    Normalize a requested SDK.

    Args:
        value: Raw value from a request body or CLI flag

    Returns:
        str | None: The SDK identifier if known, otherwise None
    """
    if isinstance(value, str) and value in VALID_SDKS:
        return value
    return None
