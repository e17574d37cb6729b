"""Configuration API endpoints"""

from __future__ import annotations

from typing import Any

from fastapi import APIRouter, HTTPException
from pydantic import BaseModel

from services.config_manager import ConfigManager

router = APIRouter()


class ConfigUpdateRequest(BaseModel):
    """Request to update configuration"""

    server: dict | None = None
    diff: dict | None = None


class ConfigResponse(BaseModel):
    """Configuration response"""

    server: dict
    diff: dict


@router.get("", response_model=ConfigResponse)
async def get_config() -> ConfigResponse:
    """Get current configuration"""
    config = ConfigManager.get_instance().get_config()

    return ConfigResponse(
        server=config.get("server", {}),
        diff=config.get("diff", {}),
    )


@router.put("")
async def update_config(request: ConfigUpdateRequest) -> dict[str, Any]:
    """Update configuration"""
    updates = request.model_dump(exclude_none=True)
    if not updates:
        raise HTTPException(status_code=400, detail="No configuration section provided")

    max_bytes = updates.get("diff", {}).get("maxDiffBytes")
    if max_bytes is not None and (not isinstance(max_bytes, int) or max_bytes <= 0):
        raise HTTPException(status_code=400, detail="diff.maxDiffBytes must be a positive integer")

    config_manager = ConfigManager.get_instance()
    current_config = config_manager.get_config()

    # Update only provided sections, merging keys within each
    for section, values in updates.items():
        current_config[section] = {**current_config.get(section, {}), **values}

    config_manager.save_config(current_config)

    return {"status": "success", "message": "Configuration updated"}
