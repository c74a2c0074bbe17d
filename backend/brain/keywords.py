"""Split a free-text exam scope into keywords."""

import re
from typing import List

# Japanese comma, full-width comma, ASCII comma, any whitespace (incl. U+3000)
_DELIMITERS = re.compile(r"[、，,\s]+")


def extract_keywords(exam_scope: str) -> List[str]:
    if not exam_scope:
        return []
    return [k for k in _DELIMITERS.split(exam_scope) if k]
