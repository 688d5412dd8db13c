"""
Password Hashing Service

Argon2id via argon2-cffi. Each hash carries its own random salt and cost
parameters, so verification needs nothing but the encoded string.
"""

from argon2 import PasswordHasher
from argon2.exceptions import InvalidHashError, VerificationError


class CredentialHasher:
    """Thin wrapper around argon2's PasswordHasher."""
    
    def __init__(self, time_cost=3, memory_cost=65536, parallelism=4):
        self._hasher = PasswordHasher(
            time_cost=time_cost,
            memory_cost=memory_cost,
            parallelism=parallelism,
        )
    
    @classmethod
    def from_config(cls, config):
        return cls(
            time_cost=config['ARGON2_TIME_COST'],
            memory_cost=config['ARGON2_MEMORY_COST'],
            parallelism=config['ARGON2_PARALLELISM'],
        )
    
    def hash(self, password, salt=None):
        """Return the encoded Argon2id hash of `password`.
        
        Args:
            password: Plaintext password
            salt: Optional salt bytes; a fresh random salt is used when omitted
        
        Returns:
            Encoded hash string (``$argon2id$...``)
        """
        if salt is None:
            return self._hasher.hash(password)
        return self._hasher.hash(password, salt=salt)
    
    def verify(self, digest, password):
        """True if `password` matches `digest`. Never raises on bad input."""
        if not digest or password is None:
            return False
        try:
            return self._hasher.verify(digest, password)
        except (VerificationError, InvalidHashError):
            return False
    
    def needs_rehash(self, digest):
        return self._hasher.check_needs_rehash(digest)
