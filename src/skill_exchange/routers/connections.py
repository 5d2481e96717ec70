"""Connection API endpoints."""

import logging

from fastapi import APIRouter, Depends, HTTPException, Query

from ..dependencies import get_storage
from ..errors import InvalidTransitionError, NotFoundError, StorageError
from ..models.connection import (
    Connection,
    ConnectionCreate,
    ConnectionLookup,
    ConnectionStatusUpdate,
)
from ..repositories import Storage

router = APIRouter(prefix="/connections", tags=["Connections"])
logger = logging.getLogger("connections_api")


@router.post("", response_model=Connection, status_code=201)
async def create_connection(
    data: ConnectionCreate, storage: Storage = Depends(get_storage)
) -> Connection:
    """Send a connection request from one skill listing to another."""
    try:
        connection = await storage.create_connection(data)
    except StorageError as e:
        logger.exception(f"Error creating connection: {e}")
        raise HTTPException(status_code=500, detail="Failed to create connection")

    logger.info(
        f"Created connection {connection.id}: "
        f"{connection.from_skill_id} -> {connection.to_skill_id}"
    )
    return connection


@router.get("/status", response_model=ConnectionLookup)
async def get_connection_status(
    from_skill_id: int = Query(..., alias="fromSkillId"),
    to_skill_id: int = Query(..., alias="toSkillId"),
    storage: Storage = Depends(get_storage),
) -> ConnectionLookup:
    """Look up the request sent from one skill to another (direction matters)."""
    try:
        connection = await storage.get_connection_status(from_skill_id, to_skill_id)
    except StorageError as e:
        logger.exception(f"Error fetching connection status: {e}")
        raise HTTPException(status_code=500, detail="Failed to fetch connection status")
    return ConnectionLookup(connection=connection)


@router.patch("/{connection_id}", response_model=Connection)
async def update_connection_status(
    connection_id: int,
    data: ConnectionStatusUpdate,
    storage: Storage = Depends(get_storage),
) -> Connection:
    """Accept or reject a pending connection request."""
    try:
        connection = await storage.update_connection_status(connection_id, data.status)
    except NotFoundError:
        raise HTTPException(status_code=404, detail="Connection not found")
    except InvalidTransitionError as e:
        raise HTTPException(status_code=409, detail=str(e))
    except StorageError as e:
        logger.exception(f"Error updating connection {connection_id}: {e}")
        raise HTTPException(status_code=500, detail="Failed to update connection status")

    logger.info(f"Connection {connection.id} {connection.status.value}")
    return connection
