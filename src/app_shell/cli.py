import argparse
import logging
import sys
from pathlib import Path

from src.app_shell.context import ServiceContext
from src.components.processing import (
    LowercaseStrategy,
    ProcessTextInput,
    UppercaseStrategy,
    process_with,
    run_process,
)
from src.components.users import CreateUserInput, run_create, run_list
from src.domain.geometry import Point, distance
from src.domain.numeric import calculate_sum, classify, safe_divide
from src.domain.text import count_words, is_plausible_address, process_data, reverse
from src.rules.loader import load_rules

logger = logging.getLogger("cli")

RULES_PATH = "config/rules.yaml"


def get_context(rules_path: Path) -> ServiceContext:
    if not rules_path.exists():
        logger.error(f"Rules file {rules_path} not found.")
        sys.exit(1)

    try:
        rules = load_rules(rules_path)
        ctx = ServiceContext.create(rules)
    except ValueError as e:
        logger.error(str(e))
        sys.exit(1)

    logging.getLogger().setLevel(rules.logging.level)
    return ctx


def handle_users(ctx: ServiceContext, args: argparse.Namespace) -> None:
    result = run_list(ctx.user_service)
    print(f"Users ({result.total}):")
    for user in result.users:
        print(f" - {user.id}: {user.name} <{user.email}>")


def handle_process(ctx: ServiceContext, args: argparse.Namespace) -> None:
    result = run_process(ProcessTextInput(strategy=args.strategy, text=args.text))
    if not result.success:
        for err in result.errors:
            logger.error(err.message)
        sys.exit(1)
    print(result.text)


def handle_demo(ctx: ServiceContext, args: argparse.Namespace) -> None:
    print("Starting user registry demo...")

    # Repository
    print(f"Users: {[u.model_dump() for u in run_list(ctx.user_service).users]}")
    created = run_create(
        CreateUserInput(name="Charlie Brown", email="charlie@example.com"),
        ctx.user_service,
    )
    if created.user is not None:
        print(f"Created user: {created.user.model_dump()}")

    # Utilities
    print(f"Sum: {calculate_sum(10, 20)}")
    print(f"Email valid: {is_plausible_address('test@example.com')}")

    processed, errors = process_data(["item1", "item2", "item3"])
    if errors:
        logger.error(errors[0].message)
    else:
        print(f"Processed data: {processed}")

    print(f"Reversed: {reverse('hello')}")
    print(f"Word count: {count_words('hello   world  rust')}")

    for divisor in (2.0, 0.0):
        quotient, errors = safe_divide(10.0, divisor)
        if errors:
            print(f"10 / {divisor}: {errors[0].message}")
        else:
            print(f"10 / {divisor} = {quotient}")

    print(f"Distance: {distance(Point(0.0, 0.0), Point(3.0, 4.0))}")
    for n in (0, 5, 50, 500, -1):
        print(f"{n}: {classify(n)}")

    # Strategies
    print(process_with(UppercaseStrategy(), "hello world"))
    print(process_with(LowercaseStrategy(), "HELLO WORLD"))
    print(f"Default strategy: {process_with(ctx.default_strategy, 'Hello Default')}")


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(description="User Registry CLI")
    parser.add_argument("--rules", default=RULES_PATH, help="Path to rules YAML")
    subparsers = parser.add_subparsers(dest="command", required=True)

    # demo
    subparsers.add_parser("demo", help="Exercise the repository, helpers and strategies")

    # users
    subparsers.add_parser("users", help="List seeded users")

    # process
    process_parser = subparsers.add_parser("process", help="Transform text with a strategy")
    process_parser.add_argument("strategy", help="Strategy name (upper, lower)")
    process_parser.add_argument("text", help="Text to transform")

    args = parser.parse_args(argv)

    logging.basicConfig(level=logging.INFO)
    ctx = get_context(Path(args.rules))

    if args.command == "demo":
        handle_demo(ctx, args)
    elif args.command == "users":
        handle_users(ctx, args)
    elif args.command == "process":
        handle_process(ctx, args)


if __name__ == "__main__":
    main()
