from __future__ import annotations

from typing import Any, Dict, List

from fastapi import APIRouter, Request

from formgrid.lib.settings import EnvSettings


router = APIRouter()


@router.get("/settings", summary="Current server settings")
def get_settings(request: Request) -> Dict[str, Any]:
    settings = getattr(request.app.state, "settings", None) or EnvSettings()
    return settings.snapshot()


@router.get("/layouts", summary="Registered form layouts")
def get_layouts(request: Request) -> List[Dict[str, Any]]:
    registry = request.app.state.pipeline.layouts
    out: List[Dict[str, Any]] = []
    for name in registry.names():
        layout = registry.get(name)
        out.append(
            {
                "name": layout.name,
                "revision": layout.revision,
                "description": layout.description,
                "regions": sorted(layout.regions),
                "min_fields": layout.min_fields,
            }
        )
    return out
