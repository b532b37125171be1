"""Servicio de usuarios.

User Service — Registration, stateless login and profile maintenance.
Passwords are stored as bcrypt hashes and every operation that changes
credentials asks for the current password first.
"""

from sqlalchemy.ext.asyncio import AsyncSession

from storefront.users import rules
from storefront.users.models import Role, User
from storefront.users.repositories.role_repository import role_repository
from storefront.users.repositories.user_repository import user_repository
from storefront.users.schemas import (
    EmailChangeRequest,
    LoginRequest,
    PasswordChangeRequest,
    PersonalDataRequest,
    ProfilePhotoRequest,
    RegisterRequest,
    UserResponse,
)
from storefront.utils.exceptions import BadRequestError, NotFoundError, UnauthorizedError
from storefront.utils.password import hash_password, verify_password
from storefront.utils.validation import is_blank

USER_NOT_FOUND = "Usuario no encontrado"
RUT_IN_USE = "El RUT ya está en uso"


class UserService:
    """Lógica de negocio de usuarios.

    Service handling user business logic.
    """

    @staticmethod
    def to_response(user: User, role: Role) -> UserResponse:
        return UserResponse(
            user_id=user.id,
            rut=user.rut,
            name=user.name,
            last_name=user.lastname,
            phone=user.phone,
            email=user.email,
            profile_photo=user.profile_photo,
            role_id=role.id,
            role_name=role.name,
            status_id=user.status_id,
        )

    async def _load(self, db: AsyncSession, user_id: int) -> UserResponse:
        row = await user_repository.get_with_role(db, user_id)
        if row is None:
            raise NotFoundError(USER_NOT_FOUND)
        return self.to_response(*row)

    async def _get_or_404(self, db: AsyncSession, user_id: int) -> User:
        user: User | None = await user_repository.get_by_id(db, user_id)
        if user is None:
            raise NotFoundError(USER_NOT_FOUND)
        return user

    async def list_users(self, db: AsyncSession) -> list[UserResponse]:
        """Lista todos los usuarios con su rol (List all users with their role)."""
        rows = await user_repository.list_with_role(db)
        return [self.to_response(*row) for row in rows]

    async def get_user(self, db: AsyncSession, user_id: int) -> UserResponse:
        """Obtiene un usuario por id.

        Sibling services call this endpoint to confirm a user exists.

        Raises:
            NotFoundError: El usuario no existe (User not found)
        """
        return await self._load(db, user_id)

    async def register(self, db: AsyncSession, data: RegisterRequest) -> UserResponse:
        """Registra un usuario nuevo.

        Every field rule is checked first and all failures are reported
        together; then email and RUT must be free and the role must exist.
        The password is hashed before it is stored.

        Args:
            db: Sesión asíncrona (Async database session)
            data: Datos del usuario (Registration data)

        Returns:
            UserResponse: Usuario creado (Created user)

        Raises:
            BadRequestError: Formato inválido, email/RUT en uso o rol inexistente
        """
        errors: str | None = rules.collect_errors(
            [
                ("rut", rules.check_rut(data.rut)),
                ("name", rules.check_name(data.name)),
                ("lastName", rules.check_last_name(data.last_name)),
                ("phone", rules.check_phone(data.phone)),
                ("email", rules.check_email(data.email)),
                ("password", rules.check_password(data.password)),
                ("profilePhoto", rules.check_profile_photo(data.profile_photo)),
                ("roleId", rules.check_role_id(data.role_id)),
                ("statusId", rules.check_status_id(data.status_id)),
            ]
        )
        if errors:
            raise BadRequestError(errors)

        if await user_repository.get_by_email(db, data.email) is not None:
            raise BadRequestError("El correo electrónico ya está en uso")
        if await user_repository.get_by_rut(db, data.rut) is not None:
            raise BadRequestError(RUT_IN_USE)
        if not await role_repository.exists(db, {"id": data.role_id}):
            raise BadRequestError("El rol especificado no existe")

        user: User = await user_repository.create(
            db,
            {
                "rut": data.rut,
                "name": data.name,
                "lastname": data.last_name,
                "phone": data.phone,
                "email": data.email,
                "password": hash_password(data.password),
                "profile_photo": data.profile_photo,
                "role_id": data.role_id,
                "status_id": data.status_id,
            },
        )
        return await self._load(db, user.id)

    async def login(self, db: AsyncSession, data: LoginRequest) -> UserResponse:
        """Verifica email y contraseña.

        Stateless check: no token or session is issued. Unknown email and
        wrong password answer the same way.

        Raises:
            BadRequestError: Falta email o contraseña (Missing credentials)
            UnauthorizedError: Credenciales inválidas (Invalid credentials)
        """
        if is_blank(data.email) or is_blank(data.password):
            raise BadRequestError("Email y contraseña son requeridos")

        user: User | None = await user_repository.get_by_email(db, data.email)
        if user is None or not verify_password(data.password, user.password):
            raise UnauthorizedError()
        return await self._load(db, user.id)

    async def update_personal_data(
        self,
        db: AsyncSession,
        user_id: int,
        data: PersonalDataRequest,
    ) -> UserResponse:
        """Actualiza RUT, nombre, apellido y/o teléfono.

        Only present fields are checked and written; a new RUT must not
        belong to another user.

        Raises:
            NotFoundError: El usuario no existe (User not found)
            BadRequestError: Formato inválido o RUT en uso
        """
        user: User = await self._get_or_404(db, user_id)

        checks: list[tuple[str, str | None]] = []
        update_data: dict = {}
        if data.rut is not None:
            checks.append(("rut", rules.check_rut(data.rut)))
            update_data["rut"] = data.rut
        if data.name is not None:
            checks.append(("name", rules.check_name(data.name)))
            update_data["name"] = data.name
        if data.last_name is not None:
            checks.append(("lastName", rules.check_last_name(data.last_name)))
            update_data["lastname"] = data.last_name
        if data.phone is not None:
            checks.append(("phone", rules.check_phone(data.phone)))
            update_data["phone"] = data.phone

        errors: str | None = rules.collect_errors(checks)
        if errors:
            raise BadRequestError(errors)

        if data.rut is not None and data.rut != user.rut:
            if await user_repository.get_by_rut(db, data.rut) is not None:
                raise BadRequestError(RUT_IN_USE)

        await user_repository.update(db, user, update_data)
        return await self._load(db, user_id)

    async def update_profile_photo(
        self,
        db: AsyncSession,
        user_id: int,
        data: ProfilePhotoRequest,
    ) -> UserResponse:
        """Reemplaza la foto de perfil (Replace or clear the profile photo).

        Raises:
            NotFoundError: El usuario no existe (User not found)
            BadRequestError: URL demasiado larga (URL too long)
        """
        user: User = await self._get_or_404(db, user_id)

        error: str | None = rules.check_profile_photo(data.photo_uri)
        if error:
            raise BadRequestError(error)

        await user_repository.update(db, user, {"profile_photo": data.photo_uri})
        return await self._load(db, user_id)

    async def update_password(
        self,
        db: AsyncSession,
        user_id: int,
        data: PasswordChangeRequest,
    ) -> None:
        """Cambia la contraseña, previa verificación de la actual.

        Raises:
            NotFoundError: El usuario no existe (User not found)
            BadRequestError: Contraseña actual incorrecta o nueva inválida
        """
        user: User = await self._get_or_404(db, user_id)

        if data.current_password is None or not verify_password(data.current_password, user.password):
            raise BadRequestError("La contraseña actual es incorrecta")
        if is_blank(data.new_password):
            raise BadRequestError("La nueva contraseña no puede estar vacía")
        error: str | None = rules.check_password(data.new_password)
        if error:
            raise BadRequestError(error)

        await user_repository.update(db, user, {"password": hash_password(data.new_password)})

    async def update_email(
        self,
        db: AsyncSession,
        user_id: int,
        data: EmailChangeRequest,
    ) -> UserResponse:
        """Cambia el correo, confirmado con la contraseña.

        Raises:
            NotFoundError: El usuario no existe (User not found)
            BadRequestError: Contraseña incorrecta, formato inválido o correo en uso
        """
        user: User = await self._get_or_404(db, user_id)

        if data.confirm_password is None or not verify_password(data.confirm_password, user.password):
            raise BadRequestError("La contraseña es incorrecta")
        error: str | None = rules.check_email(data.new_email)
        if error:
            raise BadRequestError(error)
        if await user_repository.get_by_email(db, data.new_email) is not None:
            raise BadRequestError("El email ya está en uso")

        await user_repository.update(db, user, {"email": data.new_email})
        return await self._load(db, user_id)

    async def delete_user(self, db: AsyncSession, user_id: int) -> None:
        """Elimina un usuario (Delete a user).

        Raises:
            NotFoundError: El usuario no existe (User not found)
        """
        if not await user_repository.delete(db, user_id):
            raise NotFoundError(USER_NOT_FOUND)


# Singleton
user_service: UserService = UserService()
