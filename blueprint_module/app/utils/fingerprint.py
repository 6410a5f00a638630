# 📁 blueprint_module/utils/fingerprint.py
import hashlib
import json

from ..models.render_payload import RenderPayload


def payload_fingerprint(payload: RenderPayload) -> str:
    """
    Stable sha256 of the renderer JSON. Identical payloads always hash the same,
    so the fingerprint can key render jobs and debug records.
    """
    canonical = json.dumps(payload.to_renderer_json(), sort_keys=True, separators=(",", ":"))
    return hashlib.sha256(canonical.encode()).hexdigest()
