from src.components.processing import (
    STRATEGIES,
    LowercaseStrategy,
    UppercaseStrategy,
    process_with,
)
from src.components.users import InMemoryUserRepo, UserService
from src.domain.geometry import Point, distance
from src.domain.numeric import classify, safe_divide
from src.domain.text import count_words, reverse


def _snapshot(repo: InMemoryUserRepo):
    return [u.model_dump() for u in repo.list_all()], repo.next_id


# --- R1: Identity ---
def test_R1_ids_monotonic_and_never_reused():
    """R1: New IDs exceed every ID ever issued, deletes included."""
    repo = InMemoryUserRepo()
    service = UserService(repo)
    issued = [1, 2]

    for i in range(5):
        user = service.create(f"User {i}", f"u{i}@example.com")
        assert user.id > max(issued)
        assert service.get_by_id(user.id) == user
        issued.append(user.id)
        if i % 2 == 0:
            service.delete(user.id)

    assert repo.next_id > max(issued)
    for user in repo.list_all():
        assert repo.get(user.id) == user


# --- R2: Failed mutations ---
def test_R2_not_found_leaves_state_untouched():
    """R2: update/delete of a missing ID change nothing."""
    repo = InMemoryUserRepo()
    service = UserService(repo)
    before = _snapshot(repo)

    _, update_errors = service.update(99, name="Nobody", email="nobody@example.com")
    _, delete_errors = service.delete(99)

    assert update_errors[0].code == "user_not_found"
    assert delete_errors[0].code == "user_not_found"
    assert _snapshot(repo) == before


# --- R3: Partial update ---
def test_R3_partial_update_touches_only_supplied_fields():
    service = UserService(InMemoryUserRepo())

    user, _ = service.update(1, name="A. Johnson")

    assert user.name == "A. Johnson"
    assert user.email == "alice@example.com"


# --- R4: Strategy substitutability ---
def test_R4_process_with_matches_direct_call():
    for strategy in (*STRATEGIES.values(), UppercaseStrategy(), LowercaseStrategy()):
        for text in ("hello world", "HELLO WORLD", "", "MiXeD 42"):
            assert process_with(strategy, text) == strategy.process(text)

    assert process_with(UppercaseStrategy(), "hello world") == "HELLO WORLD"
    assert process_with(LowercaseStrategy(), "HELLO WORLD") == "hello world"


# --- R5: Helpers ---
def test_R5_helper_examples():
    assert reverse("hello") == "olleh"
    assert count_words("hello   world  rust") == 3
    assert safe_divide(10.0, 2.0)[0] == 5.0
    assert safe_divide(10.0, 0.0)[1][0].code == "invalid_input"
    assert distance(Point(0, 0), Point(3, 4)) == 5.0
    assert [classify(n) for n in (0, 5, 50, 500, -1)] == [
        "Zero",
        "Small positive",
        "Medium positive",
        "Large positive",
        "Negative",
    ]
