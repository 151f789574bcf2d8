from __future__ import annotations

import json
from typing import Any, Optional


def dumps(obj: Any, *, indent: Optional[int] = None) -> str:
    """
    Минимальный JSON-дампер для ответов CLI.
    ensure_ascii=False; prettify только по запросу (indent);
    без заботы о завершающем \\n (CLI решает сам).
    """
    return json.dumps(obj, ensure_ascii=False, indent=indent)
