import json
from importlib import resources
from typing import Any, Dict

VIEWER_RESPONSE = "viewer-response.json"


def load_event(name: str = VIEWER_RESPONSE) -> Dict[str, Any]:
    raw = resources.files(__name__).joinpath(name).read_text(encoding="utf-8")
    return json.loads(raw)
