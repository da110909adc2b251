"""GET /api/base-sizes: base size overrides saved by the army importer."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any

from fastapi import APIRouter, Depends

from warplanner.config import Settings
from warplanner.dependencies import get_settings

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("/base-sizes")
async def base_sizes(settings: Settings = Depends(get_settings)) -> dict[str, Any]:
    """Contents of the base sizes file, or ``{}`` when it is missing or unreadable."""
    path = Path(settings.base_sizes_file)
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except FileNotFoundError:
        return {}
    except (OSError, ValueError) as e:
        logger.warning("Could not read base sizes from %s: %s", path, e)
        return {}
    if not isinstance(data, dict):
        logger.warning("Base sizes file %s does not hold an object", path)
        return {}
    return data
