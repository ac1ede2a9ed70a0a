import argparse
import logging
import random
import shlex
import sys

from smart_inventory.config import config
from smart_inventory.logging_setup import logger, get_logger, log_exception
from smart_inventory.exceptions import InventoryError
from smart_inventory.repository import InventoryRepository
from smart_inventory.data.item_generator import generate_sample_items
from smart_inventory.services.decision_engine import DecisionEngine
from smart_inventory.services.reporting_service import ReportingService
from smart_inventory.batch.daily_job import place_replenishment_orders, run_daily_job


def init_application(seed=None):
    """Build the sample inventory and the decision engine.

    Returns:
        Tuple of (repository, engine)
    """
    sim = config.simulation_config
    seed = sim['random_seed'] if seed is None else seed

    policy = config.policy_config
    repository = InventoryRepository(generate_sample_items(sim['item_count'], seed))
    engine = DecisionEngine(policy)

    log = logger.app_logger
    log.info(f"Inventory initialized with {len(repository)} items (seed={seed})")
    log.info(
        f"Policy: method={policy.forecasting_method}, window={policy.moving_average_window}, "
        f"alpha={policy.smoothing_alpha}, z={policy.service_level_z:.2f}"
    )
    return repository, engine


def list_items(args, repository, engine):
    items = repository.list_items()
    print(ReportingService.items_table(items))
    print(f"\nTotal items: {len(items)}")


def record_sale(args, repository, engine):
    item = repository.find_item(args.item_id)
    if item is None:
        print(f"Item not found with ID: {args.item_id}")
        return 1

    engine.record_sale(item, args.quantity)
    print(f"Recorded {args.quantity} units sold for {item.name} (ID={item.item_id}). New stock: {item.current_stock}")


def process_cycle(args, repository, engine):
    decisions = engine.process_cycle(repository.list_items())

    if args.reorder_only:
        decisions = [d for d in decisions if d.needs_reorder]

    print(ReportingService.decisions_table(decisions))
    print(f"\nItems needing reorder: {sum(1 for d in decisions if d.needs_reorder)}")


def place_orders(args, repository, engine):
    decisions = engine.process_cycle(repository.list_items())
    ordered = place_replenishment_orders(engine, decisions)
    print(f"Placed {len(ordered)} orders.")


def show_alerts(args, repository, engine):
    engine.process_cycle(repository.list_items())
    alerts = ReportingService(repository).generate_low_stock_alerts()

    if not alerts:
        print("No low stock alerts.")
    for alert in alerts:
        print(alert)


def weekly_report(args, repository, engine):
    decisions = engine.process_cycle(repository.list_items())
    print(ReportingService(repository).generate_weekly_report(decisions))


def monthly_report(args, repository, engine):
    print(ReportingService(repository).generate_monthly_report())


def simulate(args, repository, engine):
    rng = random.Random(args.seed if args.seed is not None else config.simulation_config['random_seed'])

    for day in range(1, args.days + 1):
        results = run_daily_job(repository, engine, rng)
        print(f"Day {day}: orders placed={results['orders_placed']}, low stock alerts={len(results['alerts'])}")


def receive_stock(args, repository, engine):
    item = repository.get_item(args.item_id)
    engine.receive_stock(item, args.quantity)
    print(f"Received {args.quantity} units for {item.name} (ID={item.item_id}). New stock: {item.current_stock}")


def interactive(args, repository, engine, input_func=None):
    """Run commands against one inventory until ``quit``.

    Each line takes the same subcommands as the command line. The inventory
    and engine are built once, so sales and receipts carry over between
    commands. A failing command is logged and the session continues.
    """
    parser = build_parser()
    read_line = input_func or input
    print("Interactive mode. Enter a command (e.g. 'sale 1 5'), 'help' or 'quit'.")

    while True:
        try:
            line = read_line('inventory> ')
        except EOFError:
            break

        try:
            words = shlex.split(line)
        except ValueError as e:
            print(f"Could not parse command: {e}")
            continue

        if not words:
            continue
        if words[0] in ('quit', 'exit'):
            break
        if words[0] == 'help':
            parser.print_help()
            continue

        try:
            command = parser.parse_args(words)
        except SystemExit:
            # argparse has already printed the usage error
            continue

        if command.func is interactive:
            print("Already in interactive mode.")
            continue

        try:
            command.func(command, repository, engine)
        except InventoryError as e:
            log_exception('cli', e, f"Command failed: {line}")

    return 0


def build_parser():
    parser = argparse.ArgumentParser(description='Smart Inventory Replenishment System')
    parser.add_argument('--seed', type=int, help='Random seed for the sample inventory')
    parser.add_argument('--verbose', '-v', action='store_true', help='Enable verbose logging')

    subparsers = parser.add_subparsers(dest='command', help='Command to run')
    subparsers.required = True

    list_parser = subparsers.add_parser('list', help='List all items')
    list_parser.set_defaults(func=list_items)

    sale_parser = subparsers.add_parser('sale', help='Record daily sales for an item')
    sale_parser.add_argument('item_id', type=int, help='Item ID')
    sale_parser.add_argument('quantity', type=int, help='Quantity sold')
    sale_parser.set_defaults(func=record_sale)

    receive_parser = subparsers.add_parser('receive', help='Receive stock for an item')
    receive_parser.add_argument('item_id', type=int, help='Item ID')
    receive_parser.add_argument('quantity', type=int, help='Quantity received')
    receive_parser.set_defaults(func=receive_stock)

    cycle_parser = subparsers.add_parser('cycle', help='Process the daily update and show decisions')
    cycle_parser.add_argument('--reorder-only', action='store_true', help='Show only items that need reorder')
    cycle_parser.set_defaults(func=process_cycle)

    orders_parser = subparsers.add_parser('orders', help='Place orders for items that need them')
    orders_parser.set_defaults(func=place_orders)

    alerts_parser = subparsers.add_parser('alerts', help='Show low stock alerts')
    alerts_parser.set_defaults(func=show_alerts)

    weekly_parser = subparsers.add_parser('weekly-report', help='Generate the weekly report')
    weekly_parser.set_defaults(func=weekly_report)

    monthly_parser = subparsers.add_parser('monthly-report', help='Generate the monthly report')
    monthly_parser.set_defaults(func=monthly_report)

    simulate_parser = subparsers.add_parser('simulate', help='Simulate the daily workflow')
    simulate_parser.add_argument('--days', type=int, default=1, help='Number of days to simulate')
    simulate_parser.set_defaults(func=simulate)

    interactive_parser = subparsers.add_parser(
        'interactive', help='Run commands against one persistent inventory'
    )
    interactive_parser.set_defaults(func=interactive)

    return parser


def main(argv=None):
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.verbose:
        for name in ('cli', 'app', 'decision_engine', 'daily_job'):
            get_logger(name).setLevel(logging.DEBUG)

    try:
        repository, engine = init_application(args.seed)
        result = args.func(args, repository, engine)
    except InventoryError as e:
        log_exception('cli', e, f"Command '{args.command}' failed")
        return 1

    return result or 0


if __name__ == "__main__":
    sys.exit(main())
