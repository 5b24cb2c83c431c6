"""
Wildcard matching for PRERENDER_WHITELIST / PRERENDER_BLACKLIST patterns.

``*`` matches any sequence of characters (including an empty one); all
other characters match literally and case-sensitively. The whole value
must match the pattern.
"""
import re


def _compile(pattern):
    return re.compile('^' + re.escape(pattern).replace(r'\*', '.*') + r'\Z')


def matches(pattern, value):
    if pattern == value:
        return True
    return _compile(pattern).match(value) is not None


def is_listed(needles, patterns):
    """ Return True if any of ``needles`` matches any of ``patterns``.
    ``needles`` can be a single string. """
    if isinstance(needles, str):
        needles = [needles]
    needles = list(needles)
    for pattern in patterns:
        for needle in needles:
            if matches(pattern, needle):
                return True
    return False
