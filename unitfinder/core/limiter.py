"""Rate limiter instance for SlowAPI.

Shared so both main (app.state.limiter) and route modules can use the same
instance without circular imports. Central limit strings keep rate limits DRY.
"""

from slowapi import Limiter
from slowapi.util import get_remote_address

limiter = Limiter(key_func=get_remote_address)

# Search is per keystroke, so the budget is generous; downloads are rarer.
SEARCH_LIMIT = "600/minute"
FILE_LIMIT = "120/minute"

limit_search = limiter.limit(SEARCH_LIMIT)
limit_file = limiter.limit(FILE_LIMIT)
