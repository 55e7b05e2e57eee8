"""Turns API replies into chat messages for the Streamlit page."""
from typing import Any

CONTENT_FILTERED = "CONTENT_FILTERED"


def error_message(text: str) -> dict:
    return {"role": "assistant", "content": "", "error": text}


def to_message(status_code: int, payload: Any) -> dict:
    if not isinstance(payload, dict):
        return error_message(f"Unexpected reply from backend (HTTP {status_code})")

    if status_code != 200:
        error = payload.get("error", "Request failed")
        if payload.get("details"):
            error = f"{error}: {payload['details']}"
        return error_message(error)

    generated = payload.get("generated_response")
    results = generated.get("results") if isinstance(generated, dict) else None
    first = results[0] if isinstance(results, list) and results else None
    if not isinstance(first, dict):
        first = {}

    output = first.get("outputText")
    return {
        "role": "assistant",
        "content": output.strip() if isinstance(output, str) else "",
        "filtered": first.get("completionReason") == CONTENT_FILTERED,
        "raw": generated,
    }
