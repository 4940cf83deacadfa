import secrets

from gatekeeper.config import Config
from gatekeeper.core.modules.credential.models import Credential, Principal


class CredentialProvider:
    """Single-entry credential store.

    Holds exactly one configured credential and compares submitted
    username/password pairs against it. No storage is involved, so the
    comparison can be exercised on its own.
    """

    def __init__(self, credential: Credential) -> None:
        self._credential = credential

    @classmethod
    def from_config(cls, config: Config) -> "CredentialProvider":
        return cls(
            Credential(
                username=config.auth_username,
                password=config.auth_password,
                role=config.auth_role,
                user_id=config.auth_user_id,
            )
        )

    def verify(self, username: str, password: str) -> bool:
        """Exact match of both fields, compared in constant time."""
        username_ok = secrets.compare_digest(username.encode("utf-8"), self._credential.username.encode("utf-8"))
        password_ok = secrets.compare_digest(password.encode("utf-8"), self._credential.password.encode("utf-8"))
        return username_ok and password_ok

    def authenticate(self, username: str, password: str) -> Principal | None:
        """Return the principal for a matching pair, None otherwise."""
        if not self.verify(username, password):
            return None
        return Principal.from_credential(self._credential)
