# session_auth/adapters/outbound/security/password_hasher.py

from passlib.context import CryptContext

from session_auth.application.ports.outbound import IPasswordHasher


class PasswordHasher(IPasswordHasher):
    """
    bcrypt password hashing.
    """

    def __init__(self, rounds: int = 10):
        self.crypt_context = CryptContext(schemes=["bcrypt"], deprecated="auto", bcrypt__rounds=rounds)

    def hash(self, password: str) -> str:
        """Return the hash of a plain text password."""
        return self.crypt_context.hash(password)

    def verify(self, plain_password: str, hashed_password: str) -> bool:
        """Verify if the plain text password matches the stored hash."""
        if not plain_password or not hashed_password:
            return False
        return self.crypt_context.verify(plain_password, hashed_password)


if __name__ == "__main__":
    import getpass

    print("Password hash generator (seed accounts)")
    password = getpass.getpass("Password to hash: ")

    print("\nHash generated, copy it where needed:\n")
    print(PasswordHasher().hash(password))

# Usage:
# python -m session_auth.adapters.outbound.security.password_hasher
