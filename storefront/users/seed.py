"""Datos iniciales del servicio de usuarios.

Users fixture data — the ADMIN and CLIENT roles and one administrator
account. Roles and admin are guarded independently.
"""

from sqlalchemy.ext.asyncio import AsyncSession

from storefront.users.repositories.role_repository import role_repository
from storefront.users.repositories.user_repository import user_repository
from storefront.utils.password import hash_password

ROLES: list[str] = ["ADMIN", "CLIENT"]

ADMIN_EMAIL = "admin@looprex.cl"
ADMIN_PASSWORD = "Admin123!"


async def seed_users(db: AsyncSession) -> str:
    """Crea los roles y el administrador si faltan.

    Seed the roles when the table is empty and the admin user when its
    email is not registered. A missing ADMIN role is created for the admin.

    Returns:
        str: Resumen de lo realizado (Summary message)
    """
    message: str = ""

    if await role_repository.count(db) == 0:
        for name in ROLES:
            await role_repository.create(db, {"name": name})
        message += "Roles creados: ADMIN, CLIENT. "
    else:
        message += "Roles ya existen. "

    if await user_repository.get_by_email(db, ADMIN_EMAIL) is None:
        admin_role = await role_repository.get_by_name(db, "ADMIN")
        if admin_role is None:
            # Tabla de roles poblada a mano sin ADMIN
            admin_role = await role_repository.create(db, {"name": "ADMIN"})
            message += "Rol ADMIN creado. "
        await user_repository.create(
            db,
            {
                "rut": "12345678-9",
                "name": "Admin",
                "lastname": "Sistema",
                "phone": "912345678",
                "email": ADMIN_EMAIL,
                "password": hash_password(ADMIN_PASSWORD),
                "role_id": admin_role.id,
                "status_id": 1,
            },
        )
        message += f"Usuario admin creado (email: {ADMIN_EMAIL}, password: {ADMIN_PASSWORD})."
    else:
        message += "Usuario admin ya existe."

    await db.commit()
    return message
