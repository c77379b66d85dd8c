"""Saved calculation session routes."""

import logging

from fastapi import APIRouter, Depends, HTTPException

from benefit_calc.api.deps import get_session_store
from benefit_calc.api.schemas import CalculationSessionCreate, CalculationSessionResponse
from benefit_calc.data.sessions import SessionNotFoundError, SessionStore, get_or_raise

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/calculations", tags=["sessions"])


@router.post("", response_model=CalculationSessionResponse)
async def create_session(
    req: CalculationSessionCreate,
    store: SessionStore = Depends(get_session_store),
):
    """Save a calculator run."""
    try:
        session = await store.create(req.calculator_type, req.input_data, req.results)
    except Exception:
        logger.exception("Failed to save %s calculation session", req.calculator_type)
        raise HTTPException(status_code=500, detail="Failed to save calculation session")
    return CalculationSessionResponse.model_validate(session)


@router.get("/type/{calculator_type}", response_model=list[CalculationSessionResponse])
async def list_sessions(calculator_type: str, store: SessionStore = Depends(get_session_store)):
    try:
        sessions = await store.list_by_type(calculator_type)
    except Exception:
        logger.exception("Failed to list %s calculation sessions", calculator_type)
        raise HTTPException(status_code=500, detail="Failed to retrieve calculation sessions")
    return [CalculationSessionResponse.model_validate(s) for s in sessions]


@router.get("/{session_id}", response_model=CalculationSessionResponse)
async def get_session(session_id: str, store: SessionStore = Depends(get_session_store)):
    try:
        session = await get_or_raise(store, session_id)
    except SessionNotFoundError:
        raise HTTPException(status_code=404, detail="Calculation session not found")
    except Exception:
        logger.exception("Failed to load calculation session %s", session_id)
        raise HTTPException(status_code=500, detail="Failed to retrieve calculation session")
    return CalculationSessionResponse.model_validate(session)
