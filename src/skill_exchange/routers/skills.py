"""Skill API endpoints."""

import logging

from fastapi import APIRouter, Depends, HTTPException

from ..dependencies import get_storage
from ..errors import StorageError
from ..models.connection import Connection
from ..models.skill import Skill, SkillCreate
from ..repositories import Storage

router = APIRouter(prefix="/skills", tags=["Skills"])
logger = logging.getLogger("skills_api")


@router.get("", response_model=list[Skill])
async def list_skills(storage: Storage = Depends(get_storage)) -> list[Skill]:
    """List all skills, oldest first."""
    try:
        return await storage.get_skills()
    except StorageError as e:
        logger.exception(f"Error fetching skills: {e}")
        raise HTTPException(status_code=500, detail="Failed to fetch skills")


@router.post("", response_model=Skill, status_code=201)
async def create_skill(data: SkillCreate, storage: Storage = Depends(get_storage)) -> Skill:
    """Post a new skill listing."""
    try:
        skill = await storage.create_skill(data)
    except StorageError as e:
        logger.exception(f"Error creating skill: {e}")
        raise HTTPException(status_code=500, detail="Failed to create skill")

    logger.info(f"Created skill {skill.id} for {skill.name}")
    return skill


@router.get("/{skill_id}/connections", response_model=list[Connection])
async def list_skill_connections(
    skill_id: int, storage: Storage = Depends(get_storage)
) -> list[Connection]:
    """Connection requests sent from a skill listing."""
    try:
        skill = await storage.get_skill(skill_id)
        if not skill:
            raise HTTPException(status_code=404, detail="Skill not found")
        return await storage.get_connections(skill_id)
    except StorageError as e:
        logger.exception(f"Error fetching connections for skill {skill_id}: {e}")
        raise HTTPException(status_code=500, detail="Failed to fetch connections")
