"""
Discovery Subpackage.

Locates the header files an annotation run operates on.
"""

from doxegenate.discovery.headers import collect_headers, expand_globs, parse_pro_headers

__all__ = ["collect_headers", "expand_globs", "parse_pro_headers"]
