from passlib.context import CryptContext

# pbkdf2_sha256 - czysty python, bez natywnego backendu
pwd_context = CryptContext(schemes=["pbkdf2_sha256"], deprecated="auto")


def hash_password(password: str) -> str:
    return pwd_context.hash(password)
