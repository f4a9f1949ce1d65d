"""URL Convertors — path-token shapes enforced at the routing layer.

Invariants:
    - {name:token} matches [a-zA-Z0-9-]+ only (types, taxonomies, slugs)
    - Numeric ids use Starlette's built-in {name:int} ([0-9]+)
    - A path whose tokens do not match routes nowhere (404 rest_no_route)

Design Decisions:
    - Convertors over Path(pattern=...): a shape mismatch means "no such route", not "bad parameter"
    - Registered on import; route modules import this before declaring paths
"""

from starlette.convertors import Convertor, register_url_convertor

TOKEN_PATTERN = "[a-zA-Z0-9-]+"


class TokenConvertor(Convertor):
    """Alphanumeric-and-hyphen path segment."""
    regex = TOKEN_PATTERN

    def convert(self, value: str) -> str:
        return value

    def to_string(self, value: str) -> str:
        return str(value)


register_url_convertor("token", TokenConvertor())
