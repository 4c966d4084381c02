from unmark.cleaning.base import BaseCleaner
from unmark.cleaning.cleaner import Cleaner
from unmark.cleaning.models import BoundaryPolicy
from unmark.config.settings import Settings


class CleanerFactory:
    """Creates a cleaner for the configured boundary policy."""

    POLICIES: dict[str, BoundaryPolicy] = {p.value: p for p in BoundaryPolicy}

    @classmethod
    def create(cls, settings: Settings) -> BaseCleaner:
        return Cleaner(policy=cls.resolve_policy(settings.boundary_policy))

    @classmethod
    def resolve_policy(cls, name: str) -> BoundaryPolicy:
        policy = cls.POLICIES.get(name.strip().lower())
        if policy is None:
            raise ValueError(
                f"Unknown boundary policy '{name}'. Choose from: {list(cls.POLICIES)}"
            )
        return policy
