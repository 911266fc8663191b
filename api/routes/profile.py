from __future__ import annotations

from typing import Optional
from fastapi import APIRouter, Depends, HTTPException

from ..errors import ErrorResponse
from ..schemas import CalculatedGoals, UserProfile, UserProfileIn, UserProfileUpdate
from ..security import get_current_user
from ..services.goals import calculate_goals
from ..storage.base import Storage
from ..storage.provider import get_storage

router = APIRouter(prefix="/api/profile", tags=["profile"])


@router.get("", response_model=Optional[UserProfile], summary="Perfil del usuario (null si no hay)")
def get_profile(
    storage: Storage = Depends(get_storage),
    user_id: str = Depends(get_current_user),
):
    return storage.get_user_profile(user_id)


@router.post(
    "",
    response_model=UserProfile,
    summary="Crear (o reemplazar) el perfil del usuario",
    responses={422: {"model": ErrorResponse}},
)
def create_profile(
    profile: UserProfileIn,
    storage: Storage = Depends(get_storage),
    user_id: str = Depends(get_current_user),
):
    return storage.create_user_profile(user_id, profile)


@router.put(
    "",
    response_model=UserProfile,
    summary="Actualizar parcialmente el perfil",
    responses={404: {"model": ErrorResponse}, 422: {"model": ErrorResponse}},
)
def update_profile(
    profile: UserProfileUpdate,
    storage: Storage = Depends(get_storage),
    user_id: str = Depends(get_current_user),
):
    updated = storage.update_user_profile(user_id, profile)
    if updated is None:
        raise HTTPException(status_code=404, detail="Perfil no encontrado")
    return updated


@router.get(
    "/goals",
    response_model=Optional[CalculatedGoals],
    summary="Objetivos sugeridos a partir del perfil (null si faltan edad, altura, peso o sexo)",
)
def suggested_goals(
    storage: Storage = Depends(get_storage),
    user_id: str = Depends(get_current_user),
):
    profile = storage.get_user_profile(user_id)
    if profile is None:
        return None
    return calculate_goals(profile)
