# -*- coding: utf-8 -*-
"""
sgc/modules/auth/routes/auth_routes.py

Rutas de autenticación:
- Registro de usuario en una organización
- Login (par de tokens access/refresh)
- Refresh de tokens
- Verificación del token y usuario actual

Autor: Equipo SGC
Fecha: 2026-09-16
"""

import logging

from fastapi import APIRouter, Depends, HTTPException, status

from sgc.modules.auth.dependencies import CurrentUser, get_current_user
from sgc.modules.auth.facades.errors import (
    InvalidCredentials,
    InvalidToken,
    OrganizationNotFound,
    UserAlreadyExists,
    UserLimitReached,
)
from sgc.modules.auth.routes.deps import get_auth_service
from sgc.modules.auth.schemas import (
    LoginIn,
    LoginResponse,
    RefreshIn,
    RegisterIn,
    UserRead,
    UserResponse,
    VerifyResponse,
)
from sgc.modules.auth.services import AuthService

logger = logging.getLogger(__name__)

router = APIRouter(tags=["auth"])


@router.post(
    "/register",
    response_model=UserResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Registrar usuario en una organización",
)
async def register(payload: RegisterIn, svc: AuthService = Depends(get_auth_service)):
    try:
        user = await svc.register(payload)
    except OrganizationNotFound as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Organización no encontrada") from e
    except (UserAlreadyExists, UserLimitReached) as e:
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail=str(e)) from e
    return UserResponse(message="Usuario registrado exitosamente", user=UserRead.model_validate(user))


@router.post("/login", response_model=LoginResponse, summary="Iniciar sesión")
async def login(payload: LoginIn, svc: AuthService = Depends(get_auth_service)):
    try:
        user, tokens = await svc.login(payload.email, payload.password)
    except InvalidCredentials as e:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail=str(e),
            headers={"WWW-Authenticate": "Bearer"},
        ) from e
    return LoginResponse(user=UserRead.model_validate(user), tokens=tokens)


@router.post("/refresh", response_model=LoginResponse, summary="Renovar tokens")
async def refresh(payload: RefreshIn, svc: AuthService = Depends(get_auth_service)):
    try:
        user, tokens = await svc.refresh(payload.refresh_token)
    except InvalidToken as e:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail=str(e),
            headers={"WWW-Authenticate": "Bearer"},
        ) from e
    return LoginResponse(user=UserRead.model_validate(user), tokens=tokens)


@router.get("/verify", response_model=VerifyResponse, summary="Verificar token de acceso")
async def verify(
    current: CurrentUser = Depends(get_current_user),
    svc: AuthService = Depends(get_auth_service),
):
    user = await svc.get_user(current.user_id)
    return VerifyResponse(user=UserRead.model_validate(user))


@router.get("/me", response_model=UserRead, summary="Usuario autenticado")
async def me(
    current: CurrentUser = Depends(get_current_user),
    svc: AuthService = Depends(get_auth_service),
):
    user = await svc.get_user(current.user_id)
    return UserRead.model_validate(user)
