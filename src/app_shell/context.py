from __future__ import annotations

from dataclasses import dataclass

from src.components.processing import TextProcessorPort, get_strategy
from src.components.users import InMemoryUserRepo, UserService
from src.domain.entities import User
from src.rules.models import Rules, UsersRules


def build_seed(rules: UsersRules) -> list[User] | None:
    """Seed users for the repo; None means the repo's built-in seed."""
    if not rules.seed_enabled:
        return []
    if rules.seed is None:
        return None
    return [User(id=u.id, name=u.name, email=u.email) for u in rules.seed]


@dataclass
class ServiceContext:
    user_service: UserService
    user_repo: InMemoryUserRepo
    default_strategy: TextProcessorPort
    rules: Rules

    @classmethod
    def create(cls, rules: Rules) -> ServiceContext:
        # Adapters
        user_repo = InMemoryUserRepo(seed=build_seed(rules.users))

        # Services
        user_service = UserService(user_repo)

        strategy = get_strategy(rules.processing.default_strategy)
        if strategy is None:
            raise ValueError(
                f"Unknown default strategy: {rules.processing.default_strategy}"
            )

        return cls(
            user_service=user_service,
            user_repo=user_repo,
            default_strategy=strategy,
            rules=rules,
        )
