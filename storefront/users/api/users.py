"""Router de usuarios — registro, login y perfil.

User Router — registration, stateless login, profile maintenance and the
lookups sibling services use to confirm a user exists.
"""

from typing import Annotated

from fastapi import APIRouter, Depends, Response
from sqlalchemy.ext.asyncio import AsyncSession

from storefront.database import get_db
from storefront.schemas.common import ApiResponse, no_content
from storefront.users.schemas import (
    EmailChangeRequest,
    LoginRequest,
    PasswordChangeRequest,
    PersonalDataRequest,
    ProfilePhotoRequest,
    RegisterRequest,
    UserResponse,
)
from storefront.users.services.user_service import user_service

router: APIRouter = APIRouter()


@router.post("/login", response_model=ApiResponse[UserResponse])
async def login(
    data: LoginRequest,
    db: Annotated[AsyncSession, Depends(get_db)],
) -> ApiResponse[UserResponse]:
    """Verifica credenciales; 401 si no coinciden.

    Stateless credential check. Returns the user, never a token.
    """
    user = await user_service.login(db, data)
    return ApiResponse.ok(user, "Login exitoso")


@router.post("/register", response_model=ApiResponse[UserResponse], status_code=201)
async def register(
    data: RegisterRequest,
    db: Annotated[AsyncSession, Depends(get_db)],
) -> ApiResponse[UserResponse]:
    """Registra un usuario (Register a user)."""
    user = await user_service.register(db, data)
    await db.commit()
    return ApiResponse.ok(user, "Usuario registrado exitosamente", status_code=201)


@router.get("", response_model=ApiResponse[list[UserResponse]])
async def list_users(
    db: Annotated[AsyncSession, Depends(get_db)],
) -> ApiResponse[list[UserResponse]] | Response:
    """Lista todos los usuarios; 204 si no hay ninguno."""
    users = await user_service.list_users(db)
    if not users:
        return no_content()
    return ApiResponse.listing(users, "Usuarios obtenidos exitosamente")


@router.get("/{user_id}", response_model=ApiResponse[UserResponse])
async def get_user(
    user_id: int,
    db: Annotated[AsyncSession, Depends(get_db)],
) -> ApiResponse[UserResponse]:
    """Obtiene un usuario por id (Get a user by id)."""
    user = await user_service.get_user(db, user_id)
    return ApiResponse.ok(user, "Usuario encontrado")


@router.put("/{user_id}/personal-data", response_model=ApiResponse[UserResponse])
async def update_personal_data(
    user_id: int,
    data: PersonalDataRequest,
    db: Annotated[AsyncSession, Depends(get_db)],
) -> ApiResponse[UserResponse]:
    """Actualiza RUT, nombre, apellido y teléfono (Update personal data)."""
    user = await user_service.update_personal_data(db, user_id, data)
    await db.commit()
    return ApiResponse.ok(user, "Datos personales actualizados")


@router.put("/{user_id}/profile-photo", response_model=ApiResponse[UserResponse])
async def update_profile_photo(
    user_id: int,
    data: ProfilePhotoRequest,
    db: Annotated[AsyncSession, Depends(get_db)],
) -> ApiResponse[UserResponse]:
    user = await user_service.update_profile_photo(db, user_id, data)
    await db.commit()
    return ApiResponse.ok(user, "Foto de perfil actualizada")


@router.put("/{user_id}/password", response_model=ApiResponse[None])
async def update_password(
    user_id: int,
    data: PasswordChangeRequest,
    db: Annotated[AsyncSession, Depends(get_db)],
) -> ApiResponse[None]:
    """Cambia la contraseña (Change password, current one required)."""
    await user_service.update_password(db, user_id, data)
    await db.commit()
    return ApiResponse.ok(None, "Contraseña actualizada exitosamente")


@router.put("/{user_id}/email", response_model=ApiResponse[UserResponse])
async def update_email(
    user_id: int,
    data: EmailChangeRequest,
    db: Annotated[AsyncSession, Depends(get_db)],
) -> ApiResponse[UserResponse]:
    """Cambia el correo (Change email, password confirmation required)."""
    user = await user_service.update_email(db, user_id, data)
    await db.commit()
    return ApiResponse.ok(user, "Email actualizado exitosamente")


@router.delete("/{user_id}", response_model=ApiResponse[None])
async def delete_user(
    user_id: int,
    db: Annotated[AsyncSession, Depends(get_db)],
) -> ApiResponse[None]:
    """Elimina un usuario (Delete a user)."""
    await user_service.delete_user(db, user_id)
    await db.commit()
    return ApiResponse.ok(None, "Usuario eliminado exitosamente")
