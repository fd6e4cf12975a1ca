"""
Notes API endpoints
"""

from fastapi import APIRouter, Depends, status
from sqlmodel import Session
from typing import List

from tenant_notes.core.database import get_session
from tenant_notes.core.dependencies import get_current_principal
from tenant_notes.schemas.note import NoteCreate, NoteResponse, NoteUpdate
from tenant_notes.schemas.tenant import MessageResponse
from tenant_notes.schemas.token import Principal
from tenant_notes.services import notes as note_service

router = APIRouter()


@router.get("", response_model=List[NoteResponse])
def list_notes(
    principal: Principal = Depends(get_current_principal),
    session: Session = Depends(get_session)
):
    """List all notes for the caller's tenant, newest first"""
    notes = note_service.list_notes(session, principal)
    return [NoteResponse.model_validate(note) for note in notes]


@router.post("", response_model=NoteResponse, status_code=status.HTTP_201_CREATED)
def create_note(
    note_data: NoteCreate,
    principal: Principal = Depends(get_current_principal),
    session: Session = Depends(get_session)
):
    """Create a note"""
    note = note_service.create_note(session, principal, note_data.title, note_data.content)
    return NoteResponse.model_validate(note)


@router.get("/{note_id}", response_model=NoteResponse)
def get_note(
    note_id: str,
    principal: Principal = Depends(get_current_principal),
    session: Session = Depends(get_session)
):
    """Get a specific note"""
    note = note_service.get_note(session, principal, note_id)
    return NoteResponse.model_validate(note)


@router.put("/{note_id}", response_model=NoteResponse)
def update_note(
    note_id: str,
    note_data: NoteUpdate,
    principal: Principal = Depends(get_current_principal),
    session: Session = Depends(get_session)
):
    """Update a note's title and content"""
    note = note_service.update_note(session, principal, note_id, note_data.title, note_data.content)
    return NoteResponse.model_validate(note)


@router.delete("/{note_id}", response_model=MessageResponse)
def delete_note(
    note_id: str,
    principal: Principal = Depends(get_current_principal),
    session: Session = Depends(get_session)
):
    """Delete a note"""
    note_service.delete_note(session, principal, note_id)
    return MessageResponse(message="Note deleted successfully")
