from typing import Any

import simplejson
from fastapi.responses import JSONResponse


def dump_json(payload: Any) -> str:
    # Decimal values are written as JSON numbers exactly as quantized ("30.00").
    return simplejson.dumps(payload, use_decimal=True, ensure_ascii=False, separators=(",", ":"))


def error_payload(err) -> dict:
    return {"error": err.code}


class LedgerJSONResponse(JSONResponse):
    def render(self, content: Any) -> bytes:
        return dump_json(content).encode("utf-8")
