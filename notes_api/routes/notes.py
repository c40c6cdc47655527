"""
Note routes. Every endpoint requires a valid session.
"""

import logging
from typing import Optional

from fastapi import APIRouter, Depends, HTTPException
from fastapi.responses import JSONResponse

from ..auth import AuthenticatedIdentity
from ..db import NoteCreate, NoteUpdate
from ..dependencies import get_db, require_auth

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/notes")


@router.get("/get")
async def list_notes(identity: AuthenticatedIdentity = Depends(require_auth)):
    """List the caller's notes."""
    notes = await get_db().get_notes(identity.user_id)
    return [note.model_dump(mode="json") for note in notes]


@router.post("/create", status_code=201)
async def create_note(
    body: Optional[NoteCreate] = None,
    identity: AuthenticatedIdentity = Depends(require_auth)
):
    """Create a note owned by the caller."""
    body = body or NoteCreate()
    if not body.name or not body.description or not body.urgency:
        return JSONResponse({"message": "All the fields are required"}, status_code=400)

    note = await get_db().create_note(
        name=body.name,
        description=body.description,
        urgency=body.urgency,
        user_id=identity.user_id
    )
    logger.info(f"User {identity.user_id} created note {note.id}")
    return note.model_dump(mode="json")


@router.get("/get/{note_id}")
async def get_note(note_id: int, identity: AuthenticatedIdentity = Depends(require_auth)):
    """Get one of the caller's notes."""
    note = await get_db().get_note(note_id, identity.user_id)
    if not note:
        raise HTTPException(status_code=404, detail={"message": "The note doesnt exist"})
    return note.model_dump(mode="json")


@router.put("/update/{note_id}")
async def update_note(
    note_id: int,
    body: Optional[NoteUpdate] = None,
    identity: AuthenticatedIdentity = Depends(require_auth)
):
    """Rename or re-describe one of the caller's notes."""
    body = body or NoteUpdate()
    if not body.name or not body.description:
        return JSONResponse({"message": "All the fields are required"}, status_code=400)

    note = await get_db().update_note(note_id, identity.user_id, body.name, body.description)
    if not note:
        raise HTTPException(status_code=404, detail={"message": "The note doesnt exist"})
    return {"message": "Note updated successfully", "note": note.model_dump(mode="json")}


@router.delete("/delete/{note_id}")
async def delete_note(note_id: int, identity: AuthenticatedIdentity = Depends(require_auth)):
    """Delete one of the caller's notes."""
    deleted = await get_db().delete_note(note_id, identity.user_id)
    if not deleted:
        raise HTTPException(status_code=404, detail={"message": "The note doesnt exist"})
    return {"message": "Note deleted successfully"}
