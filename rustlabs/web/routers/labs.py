"""Rust Labs lookup endpoints."""

from __future__ import annotations

from typing import Any

from fastapi import APIRouter, HTTPException
from pydantic import BaseModel, Field

from rustlabs.application import LabsServiceError
from rustlabs.bootstrap import get_container

router = APIRouter(prefix="/labs")


class LabsOptions(BaseModel):
    groups: list[str] = Field(description="Durability damage source groups")
    which: list[str] = Field(description="Durability armor sides")
    order_by: list[str] = Field(description="Durability ordering options")


@router.get("/options", response_model=LabsOptions)
async def get_options() -> dict[str, list[str]]:
    return get_container().labs.get_options()


@router.get("/craft")
async def get_craft(item: str) -> dict[str, Any]:
    try:
        return get_container().labs.get_craft(item)
    except LabsServiceError as exc:
        raise HTTPException(status_code=exc.status_code, detail=str(exc)) from exc


@router.get("/research")
async def get_research(item: str) -> dict[str, Any]:
    try:
        return get_container().labs.get_research(item)
    except LabsServiceError as exc:
        raise HTTPException(status_code=exc.status_code, detail=str(exc)) from exc


@router.get("/recycle")
async def get_recycle(item: str) -> dict[str, Any]:
    try:
        return get_container().labs.get_recycle(item)
    except LabsServiceError as exc:
        raise HTTPException(status_code=exc.status_code, detail=str(exc)) from exc


@router.get("/durability")
async def get_durability(
    name: str,
    group: str | None = None,
    which: str | None = None,
    order_by: str | None = None,
) -> dict[str, Any]:
    try:
        return get_container().labs.get_durability(
            name,
            group=group,
            which=which,
            order_by=order_by,
        )
    except LabsServiceError as exc:
        raise HTTPException(status_code=exc.status_code, detail=str(exc)) from exc
