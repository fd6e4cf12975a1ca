"""
Tenant-scoped note operations

Every query is filtered by the caller's tenant. A note that belongs to
another tenant is reported exactly like a note that does not exist.
"""

from typing import List, Optional, Union
import uuid

from sqlalchemy import func
from sqlalchemy.orm import selectinload
from sqlmodel import Session, select
import structlog

from tenant_notes.core.config import get_settings
from tenant_notes.core.exceptions import NotFound, PlanLimitReached, TenantNotesError, ValidationFailed
from tenant_notes.models.base import utcnow
from tenant_notes.models.note import Note
from tenant_notes.models.tenant import Tenant, TenantPlan
from tenant_notes.schemas.token import Principal

logger = structlog.get_logger(__name__)
settings = get_settings()

NOTE_NOT_FOUND = "Note not found"
PLAN_LIMIT_MESSAGE = "Note limit reached. Upgrade to Pro for unlimited notes."


def _require_title(title: Optional[str]) -> str:
    if not title or not title.strip():
        raise ValidationFailed("Title is required")
    return title


def _parse_note_id(note_id: Union[str, uuid.UUID]) -> uuid.UUID:
    if isinstance(note_id, uuid.UUID):
        return note_id
    try:
        return uuid.UUID(str(note_id))
    except ValueError:
        raise NotFound(NOTE_NOT_FOUND) from None


def _get_scoped_note(session: Session, principal: Principal, note_id: Union[str, uuid.UUID]) -> Note:
    """Fetch by id AND tenant jointly"""
    note = session.exec(
        select(Note)
        .where(Note.id == _parse_note_id(note_id), Note.tenant_id == principal.tenant_id)
        .options(selectinload(Note.user))
    ).first()
    if note is None:
        raise NotFound(NOTE_NOT_FOUND)
    return note


def count_notes(session: Session, tenant_id: uuid.UUID) -> int:
    return session.exec(
        select(func.count()).select_from(Note).where(Note.tenant_id == tenant_id)
    ).one()


def list_notes(session: Session, principal: Principal) -> List[Note]:
    """All notes of the caller's tenant, most recent first"""
    return list(session.exec(
        select(Note)
        .where(Note.tenant_id == principal.tenant_id)
        .options(selectinload(Note.user))
        .order_by(Note.created_at.desc())
    ).all())


def get_note(session: Session, principal: Principal, note_id: Union[str, uuid.UUID]) -> Note:
    return _get_scoped_note(session, principal, note_id)


def create_note(
    session: Session,
    principal: Principal,
    title: Optional[str],
    content: Optional[str] = None,
) -> Note:
    """Create a note, enforcing the FREE plan ceiling.

    The tenant row is locked for the rest of the transaction so that the
    count and the insert are atomic with respect to other creators in the
    same tenant.
    """
    title = _require_title(title)

    try:
        tenant = session.exec(
            select(Tenant)
            .where(Tenant.id == principal.tenant_id)
            .with_for_update()
            .execution_options(populate_existing=True)
        ).first()
        if tenant is None:
            raise NotFound("Tenant not found")

        # Plan is read live, so an upgrade takes effect without re-login
        if tenant.plan == TenantPlan.FREE:
            existing = count_notes(session, tenant.id)
            if existing >= settings.FREE_PLAN_NOTE_LIMIT:
                logger.info(f"Plan limit reached for tenant {tenant.id}: {existing} notes")
                raise PlanLimitReached(PLAN_LIMIT_MESSAGE)

        note = Note(
            title=title,
            content=content or "",
            tenant_id=principal.tenant_id,
            user_id=principal.user_id,
        )
        session.add(note)
        session.commit()
    except TenantNotesError:
        session.rollback()
        raise
    except Exception as e:
        session.rollback()
        logger.error(f"Error creating note: {e}")
        raise

    logger.info(f"Created note {note.id} in tenant {principal.tenant_id}")
    return _get_scoped_note(session, principal, note.id)


def update_note(
    session: Session,
    principal: Principal,
    note_id: Union[str, uuid.UUID],
    title: Optional[str],
    content: Optional[str] = None,
) -> Note:
    """Replace title and content; ownership fields are never touched"""
    title = _require_title(title)
    note = _get_scoped_note(session, principal, note_id)

    try:
        note.title = title
        note.content = content or ""
        note.updated_at = utcnow()
        session.add(note)
        session.commit()
        session.refresh(note)
    except Exception as e:
        session.rollback()
        logger.error(f"Error updating note {note_id}: {e}")
        raise

    logger.info(f"Updated note {note.id}")
    return note


def delete_note(session: Session, principal: Principal, note_id: Union[str, uuid.UUID]) -> None:
    note = _get_scoped_note(session, principal, note_id)

    try:
        session.delete(note)
        session.commit()
    except Exception as e:
        session.rollback()
        logger.error(f"Error deleting note {note_id}: {e}")
        raise

    logger.info(f"Deleted note {note_id} from tenant {principal.tenant_id}")
