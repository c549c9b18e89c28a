"""
Provider response capture for debugging image strategies.

When DEBUG_LOGS_ENABLED is set, raw provider responses are dumped as
timestamped JSON files under DEBUG_LOG_DIR. Capture failures are logged and
never interrupt a request.

NEVER pass API keys or request headers to save_debug_log.
"""

import json
import re
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Dict, List, Optional

from mixology.config import settings
from mixology.utils.logging import get_logger

logger = get_logger(__name__)

_URL_PATTERN = re.compile(r'https?://[^\s"\')]+')


def _to_jsonable(data: Any) -> Any:
    """Convert SDK response objects (Pydantic models) into plain data."""
    if hasattr(data, "model_dump"):
        return data.model_dump(exclude_none=True)
    return data


def save_debug_log(
    label: str,
    data: Any,
    directory: Optional[str] = None,
    enabled: Optional[bool] = None,
) -> Optional[Path]:
    """
    Save a provider response as pretty-printed JSON.

    Args:
        label: Prefix for the file name (usually the strategy name)
        data: Response object or plain data
        directory: Target directory (defaults to settings.DEBUG_LOG_DIR)
        enabled: Override settings.DEBUG_LOGS_ENABLED

    Returns:
        Path of the written file, or None when disabled or on failure
    """
    if enabled is None:
        enabled = settings.DEBUG_LOGS_ENABLED
    if not enabled:
        return None

    target_dir = Path(directory or settings.DEBUG_LOG_DIR)
    timestamp = datetime.now(timezone.utc).strftime("%Y-%m-%dT%H-%M-%S-%fZ")
    safe_label = re.sub(r'[^A-Za-z0-9_.-]', '_', label)
    filename = target_dir / f"{safe_label}_{timestamp}.json"

    try:
        target_dir.mkdir(parents=True, exist_ok=True)
        filename.write_text(json.dumps(_to_jsonable(data), indent=2, default=str))
    except (OSError, TypeError, ValueError) as e:
        logger.error(f"Failed to save debug log for {label}: {e}")
        return None

    logger.info(f"Debug log saved to {filename}")
    return filename


def analyze_response(response: Any) -> Dict[str, Any]:
    """
    Summarize whether a provider response carries image content.

    Recognizes DALL-E style payloads ({"data": [{"url": ...}]}) and chat
    completion payloads ({"choices": [{"message": {"content": ...}}]}).

    Returns:
        Dict with has_image_content, content_type and urls
    """
    result: Dict[str, Any] = {
        "has_image_content": False,
        "content_type": "unknown",
        "urls": [],
    }

    if response is None:
        result["content_type"] = "null"
        return result

    payload = _to_jsonable(response)
    if not isinstance(payload, dict):
        return result

    urls: List[str] = result["urls"]

    data_items = payload.get("data")
    if isinstance(data_items, list):
        result["content_type"] = "dalle-style"
        for item in data_items:
            if isinstance(item, dict) and item.get("url"):
                urls.append(item["url"])

    choices = payload.get("choices")
    if isinstance(choices, list):
        result["content_type"] = "chat-completion"
        for choice in choices:
            message = choice.get("message") if isinstance(choice, dict) else None
            content = message.get("content") if isinstance(message, dict) else None
            if isinstance(content, str):
                urls.extend(_URL_PATTERN.findall(content))
            elif isinstance(content, list):
                for part in content:
                    if (
                        isinstance(part, dict)
                        and part.get("type") == "image_url"
                        and isinstance(part.get("image_url"), dict)
                        and part["image_url"].get("url")
                    ):
                        urls.append(part["image_url"]["url"])

    result["has_image_content"] = bool(urls)
    return result
