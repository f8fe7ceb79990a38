"""Parse repository references from configuration strings."""

from dataclasses import dataclass

from reminder_bot.core.exceptions import InvalidRepositoryError


@dataclass(frozen=True)
class RepoReference:
    """Parsed owner/name repository reference."""

    owner: str
    name: str

    @property
    def full_name(self) -> str:
        return f"{self.owner}/{self.name}"


def split_repo_list(value: str | None) -> list[str]:
    """Split a comma-separated repository list, dropping blank entries."""
    if not value:
        return []
    return [token.strip() for token in value.split(",") if token.strip()]


def parse_repo_reference(value: str) -> RepoReference:
    """
    Parse a single ``owner/name`` reference.

    Both halves must be non-empty and there must be exactly one slash,
    otherwise InvalidRepositoryError is raised.
    """
    parts = value.strip().split("/")
    if len(parts) != 2:
        raise InvalidRepositoryError(value)

    owner, name = (part.strip() for part in parts)
    if not owner or not name:
        raise InvalidRepositoryError(value)

    return RepoReference(owner=owner, name=name)
