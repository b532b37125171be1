"""Hash y verificación de contraseñas.

Password utilities over bcrypt. bcrypt only reads the first 72 bytes of a
password (and current releases refuse longer input), so registration
rejects longer passwords and verification treats them as a mismatch.
"""

import bcrypt

# Límite de bcrypt, en bytes UTF-8
MAX_PASSWORD_BYTES = 72


def fits_bcrypt(password: str) -> bool:
    """True si la contraseña cabe en bcrypt (At most 72 UTF-8 bytes)."""
    return len(password.encode("utf-8")) <= MAX_PASSWORD_BYTES


def hash_password(password: str) -> str:
    """Hash bcrypt con sal aleatoria de una contraseña de hasta 72 bytes."""
    return bcrypt.hashpw(password.encode("utf-8"), bcrypt.gensalt()).decode("utf-8")


def verify_password(plain_password: str, hashed_password: str) -> bool:
    """Compara una contraseña con su hash bcrypt.

    A password longer than bcrypt accepts can never have been stored, so it
    is reported as a mismatch instead of reaching bcrypt.

    Returns:
        bool: True si coinciden (True if the password matches)
    """
    if not fits_bcrypt(plain_password):
        return False
    return bcrypt.checkpw(plain_password.encode("utf-8"), hashed_password.encode("utf-8"))
