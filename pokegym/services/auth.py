"""
Auth gateway - registration, login, and bearer token resolution.
"""
import logging
from typing import Optional

from jose import JWTError
from sqlalchemy.exc import IntegrityError
from sqlmodel import Session, select

from pokegym.errors import (
    EmailAlreadyRegistered,
    InvalidCredentials,
    InvalidToken,
    MissingToken,
    ServerMisconfigured,
    UnknownSubject,
)
from pokegym.models.trainer import Trainer
from pokegym.security import (
    create_access_token,
    decode_access_token,
    hash_password,
    verify_password,
)

logger = logging.getLogger(__name__)


class AuthGateway:
    def __init__(
        self,
        session: Session,
        secret: Optional[str],
        algorithm: str = "HS256",
        expire_minutes: int = 1440,
    ):
        self.session = session
        self.secret = secret
        self.algorithm = algorithm
        self.expire_minutes = expire_minutes

    def _require_secret(self) -> str:
        if not self.secret:
            logger.error("JWT_SECRET is not configured")
            raise ServerMisconfigured()
        return self.secret

    def register(self, name: str, email: str, password: str) -> Trainer:
        email = email.strip().lower()
        existing = self.session.exec(
            select(Trainer).where(Trainer.email == email)
        ).first()
        if existing:
            raise EmailAlreadyRegistered()

        trainer = Trainer(
            name=name.strip(),
            email=email,
            password_hash=hash_password(password),
        )
        self.session.add(trainer)
        try:
            self.session.commit()
        except IntegrityError as e:
            self.session.rollback()
            raise EmailAlreadyRegistered() from e
        self.session.refresh(trainer)

        logger.info("Registered trainer %s", trainer.id)
        return trainer

    def login(self, email: str, password: str) -> str:
        """Check credentials and return a signed access token."""
        secret = self._require_secret()
        trainer = self.session.exec(
            select(Trainer).where(Trainer.email == email.strip().lower())
        ).first()
        if not trainer or not verify_password(password, trainer.password_hash):
            raise InvalidCredentials()

        return create_access_token(
            trainer.id,
            secret,
            algorithm=self.algorithm,
            expires_minutes=self.expire_minutes,
        )

    def resolve(self, token: Optional[str]) -> Trainer:
        """Resolve a bearer token to the trainer it was issued for."""
        if not token:
            raise MissingToken()
        secret = self._require_secret()

        try:
            claims = decode_access_token(token, secret, algorithm=self.algorithm)
            trainer_id = int(claims["sub"])
        except (JWTError, KeyError, TypeError, ValueError) as e:
            logger.info("Rejected access token: %s", e)
            raise InvalidToken() from e

        trainer = self.session.get(Trainer, trainer_id)
        if not trainer:
            raise UnknownSubject()
        return trainer
