"""
Tests for ServiceContext wiring.
"""

from __future__ import annotations

import pytest

from src.app_shell.context import ServiceContext, build_seed
from src.components.processing import LowercaseStrategy
from src.rules.loader import parse_rules
from src.rules.models import UsersRules


def _rules(extra: str = ""):
    return parse_rules("project: {slug: x, rules_version: '1'}\n" + extra)


def test_context_uses_builtin_seed(test_ctx: ServiceContext) -> None:
    users = test_ctx.user_service.get_all()

    assert [u.name for u in users] == ["Alice Johnson", "Bob Smith"]
    assert test_ctx.user_repo.next_id == 3


def test_context_default_strategy(test_ctx: ServiceContext) -> None:
    assert isinstance(test_ctx.default_strategy, LowercaseStrategy)


def test_seeding_disabled() -> None:
    ctx = ServiceContext.create(_rules("users: {seed_enabled: false}\n"))

    assert ctx.user_service.get_all() == []
    assert ctx.user_service.create("First", "first@example.com").id == 1


def test_custom_seed_sets_counter() -> None:
    ctx = ServiceContext.create(
        _rules(
            "users:\n"
            "  seed:\n"
            "    - {id: 7, name: Gina, email: gina@example.com}\n"
            "    - {id: 3, name: Hal, email: hal@example.com}\n"
        )
    )

    assert [u.id for u in ctx.user_service.get_all()] == [3, 7]
    assert ctx.user_service.create("Ivy", "ivy@example.com").id == 8


def test_build_seed_variants() -> None:
    assert build_seed(UsersRules()) is None
    assert build_seed(UsersRules(seed_enabled=False)) == []


def test_unknown_default_strategy() -> None:
    with pytest.raises(ValueError, match="Unknown default strategy"):
        ServiceContext.create(_rules("processing: {default_strategy: title}\n"))
