"""
Domain errors.

Every error the managers raise is a ``PokeGymError`` subclass carrying the HTTP
status it maps to. ``main.py`` installs one exception handler for the base class,
so routers never translate errors themselves.
"""


class PokeGymError(Exception):
    status_code = 500
    default_message = "Internal server error"

    def __init__(self, message: str | None = None):
        self.message = message or self.default_message
        super().__init__(self.message)


# --- Kinds ---

class ValidationError(PokeGymError):
    status_code = 400
    default_message = "Invalid request"


class NotFoundError(PokeGymError):
    status_code = 404
    default_message = "Not found"


class ConflictError(PokeGymError):
    status_code = 409
    default_message = "Conflict"


class AuthError(PokeGymError):
    status_code = 401
    default_message = "Not authenticated"


class UpstreamError(PokeGymError):
    status_code = 502
    default_message = "Upstream service failed"


class InternalError(PokeGymError):
    status_code = 500


# --- Not found ---

class TrainerNotFound(NotFoundError):
    default_message = "Trainer not found"


class GymNotFound(NotFoundError):
    default_message = "Gym not found"


class PokemonNotInRoster(NotFoundError):
    default_message = "Pokemon not found in your team"


# --- Conflicts ---

class RosterFull(ConflictError):
    default_message = "Cannot have more than 6 Pokemon in your team"


class DuplicatePokemon(ConflictError):
    default_message = "This Pokemon is already in your team"


class DuplicateGymName(ConflictError):
    default_message = "Gym name already exists"


class DuplicateBadgeName(ConflictError):
    default_message = "Badge name already exists"


class AlreadyMember(ConflictError):
    default_message = "You are already a member of this gym"


class NotMember(ConflictError):
    default_message = "You are not a member of this gym"


class AlreadyHasBadge(ConflictError):
    default_message = "Trainer already has this badge"


class EmailAlreadyRegistered(ConflictError):
    default_message = "Email is already registered"


# --- Auth ---

class MissingToken(AuthError):
    default_message = "Access token required"


class InvalidToken(AuthError):
    status_code = 403
    default_message = "Invalid or expired token"


class UnknownSubject(AuthError):
    default_message = "Invalid token"


class InvalidCredentials(AuthError):
    default_message = "Invalid credentials"


class ServerMisconfigured(InternalError):
    default_message = "JWT secret not configured"


# --- Upstream ---

class PokemonLookupFailed(UpstreamError):
    """PokeAPI could not produce data for an identifier."""

    def __init__(self, identifier: str, reason: str = ""):
        self.identifier = identifier
        self.reason = reason
        message = f"Failed to fetch Pokemon data for '{identifier}'"
        if reason:
            message = f"{message}: {reason}"
        super().__init__(message)


class PokemonNotFound(UpstreamError):
    status_code = 400
    default_message = "Pokemon not found in PokeAPI"
