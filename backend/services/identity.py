"""Identity provider: sign-up, sign-in, token lookup and sign-out.

Identities are resolved from a bearer token on every request; nothing
about the current user is cached at module level. Profiles live in the
``users`` table, password hashes stay private to the provider.
"""

import hashlib
import hmac
import logging
import secrets
import threading
import uuid
from datetime import datetime, timedelta, timezone

import jwt

from models.schemas.identity import Identity, Session
from services.errors import AlreadyRegistered, InvalidCredentials
from services.record_store import RecordStore
from services.validation import (
    validate_email,
    validate_name,
    validate_password,
    validate_role,
)

logger = logging.getLogger(__name__)

PBKDF2_ITERATIONS = 100_000
JWT_ALGORITHM = "HS256"


def hash_password(password: str) -> str:
    salt = secrets.token_hex(16)
    hashed = hashlib.pbkdf2_hmac("sha256", password.encode(), salt.encode(), PBKDF2_ITERATIONS)
    return f"{salt}${hashed.hex()}"


def verify_password(password: str, stored: str) -> bool:
    salt, _, expected = stored.partition("$")
    if not salt or not expected:
        return False
    check = hashlib.pbkdf2_hmac("sha256", password.encode(), salt.encode(), PBKDF2_ITERATIONS)
    return hmac.compare_digest(check.hex(), expected)


class IdentityProvider:
    def __init__(self, store: RecordStore, secret: str, ttl_minutes: int = 60 * 24 * 30):
        self.store = store
        self._secret = secret
        self._ttl = timedelta(minutes=ttl_minutes)
        self._credentials: dict[str, str] = {}  # user id -> password hash
        self._revoked: set[str] = set()  # token jti values
        self._lock = threading.Lock()

    def sign_up(self, email: str, password: str, name: str, role: str) -> Identity:
        email = validate_email(email)
        validate_password(password)
        name = validate_name(name)
        role = validate_role(role)

        with self._lock:
            if self.store.read_one("users", {"email": email}) is not None:
                raise AlreadyRegistered()
            record = self.store.insert(
                "users",
                {"id": str(uuid.uuid4()), "email": email, "name": name, "role": role},
            )
            self._credentials[record["id"]] = hash_password(password)

        logger.info("Registered %s user %s", role, record["id"])
        return Identity(**record)

    def sign_in(self, email: str, password: str) -> Session:
        email = validate_email(email)
        validate_password(password)

        record = self.store.read_one("users", {"email": email})
        stored = self._credentials.get(record["id"]) if record else None
        if stored is None or not verify_password(password, stored):
            logger.info("Failed sign-in attempt")
            raise InvalidCredentials()

        return Session(token=self._issue_token(record["id"]), identity=Identity(**record))

    def get_current_identity(self, token: str | None) -> Identity | None:
        """Resolve a bearer token to its identity, or None if it is not usable."""
        if not token:
            return None
        try:
            payload = jwt.decode(token, self._secret, algorithms=[JWT_ALGORITHM])
        except jwt.ExpiredSignatureError:
            logger.debug("Rejected expired token")
            return None
        except jwt.InvalidTokenError:
            logger.debug("Rejected invalid token")
            return None

        if payload.get("jti") in self._revoked:
            return None
        record = self.store.get("users", payload.get("sub", ""))
        if record is None:
            return None
        return Identity(**record)

    def sign_out(self, token: str) -> None:
        try:
            payload = jwt.decode(
                token,
                self._secret,
                algorithms=[JWT_ALGORITHM],
                options={"verify_exp": False},
            )
        except jwt.InvalidTokenError:
            return
        jti = payload.get("jti")
        if jti:
            with self._lock:
                self._revoked.add(jti)

    def forget(self, user_id: str) -> None:
        """Drop stored credentials for a deleted user."""
        with self._lock:
            self._credentials.pop(user_id, None)

    def _issue_token(self, user_id: str) -> str:
        now = datetime.now(timezone.utc)
        return jwt.encode(
            {
                "sub": user_id,
                "jti": uuid.uuid4().hex,
                "iat": now,
                "exp": now + self._ttl,
            },
            self._secret,
            algorithm=JWT_ALGORITHM,
        )
