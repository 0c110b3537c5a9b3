from __future__ import annotations

import re

OPEN = "<kbd>"
CLOSE = "</kbd>"

# Non-greedy and line-scoped: nested pairs resolve to the first CLOSE.
TAG_PAIR_RE = re.compile(re.escape(OPEN) + r"(.*?)" + re.escape(CLOSE))
