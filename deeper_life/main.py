#!/usr/bin/env python3
"""
deeper - Daily routine gate and habit tracker.

The morning routine unlocks the day, the evening routine closes it.
"""

import argparse
import logging
import sys

from deeper_life.core.config import load_config, get_default_config_path
from deeper_life.core.models import EVENING, MORNING
from deeper_life.routines.gate import Page
from deeper_life.storage import JsonFileStore
from deeper_life.commands import (
    StatusCommand,
    RoutineCommand,
    HabitsCommand,
    StudyCommand,
    JournalCommand,
    DataCommand,
    gate_redirect,
)

GATE_EXIT_CODE = 2

ROUTINE_PAGES = {
    MORNING: Page.MORNING_ROUTINE,
    EVENING: Page.EVENING_ROUTINE,
}

COMMAND_PAGES = {
    'habits': Page.HABITS,
    'study': Page.STUDY,
    'journal': Page.JOURNAL,
}

REDIRECT_HINTS = {
    Page.LOCKED: "It's too early. Come back after your morning time.",
    Page.MORNING_ROUTINE: "Finish your morning routine first: deeper routine show morning",
    Page.EVENING_ROUTINE: "It's evening routine time: deeper routine show evening",
    Page.EVENING_DONE: "Your day is complete. Rest well.",
}


def page_for(args) -> str:
    """Page a gated command corresponds to, or None for ungated commands."""
    if args.command == 'routine':
        return ROUTINE_PAGES.get(args.routine)
    return COMMAND_PAGES.get(args.command)


def main(argv=None):
    """Main entry point for deeper."""
    parser = argparse.ArgumentParser(
        description="Daily routine gate and habit tracker",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  deeper status                          # Where the day stands
  deeper routine show morning            # Morning checklist
  deeper routine check morning water     # Tick off an item
  deeper routine timer morning stretch
  deeper routine finalize morning        # Close the routine
  deeper habits track exercise           # Track a habit for today
  deeper habits report --export out.json
  deeper data export                     # Write a dated backup
        """
    )

    default_config = get_default_config_path()

    parser.add_argument(
        '--config',
        help=f'Path to configuration file (default: {default_config})',
        default=None
    )
    parser.add_argument(
        '--data-dir',
        help='Directory holding the stored record (overrides config)',
        default=None
    )
    parser.add_argument(
        '--verbose', '-v',
        action='store_true',
        help='Verbose output'
    )
    parser.add_argument(
        '--ignore-gate',
        action='store_true',
        help='Run page commands even when a routine is due'
    )

    subparsers = parser.add_subparsers(dest='command', help='Commands')

    subparsers.add_parser('status', help='Show greeting, gate mode and progress')

    # Routine command
    routine_parser = subparsers.add_parser('routine', help='Morning and evening routines')
    routine_parser.add_argument(
        'action',
        choices=['show', 'check', 'timer', 'finalize'],
        help='Routine action'
    )
    routine_parser.add_argument('routine', choices=[MORNING, EVENING], help='Routine name')
    routine_parser.add_argument('item', nargs='?', help='Item id (check, timer)')
    routine_parser.add_argument('--value', help='Counter amount or text for the item')

    # Habits command
    habits_parser = subparsers.add_parser('habits', help='Habit tracking and analytics')
    habits_parser.add_argument(
        'action',
        choices=['list', 'track', 'stats', 'report'],
        help='Habits action'
    )
    habits_parser.add_argument('habit', nargs='?', help='Habit id (track, stats)')
    habits_parser.add_argument('--date', help='Date to track (YYYY-MM-DD, default today)')
    habits_parser.add_argument('--category', help='Only list habits in this category')
    habits_parser.add_argument('--export', metavar='PATH', help='Also write the report as JSON')

    # Study command
    study_parser = subparsers.add_parser('study', help='Study sessions')
    study_parser.add_argument('action', choices=['log', 'summary'], help='Study action')
    study_parser.add_argument('--minutes', type=int, default=0, help='Session length in minutes')
    study_parser.add_argument('--subject', help='What you studied')
    study_parser.add_argument('--notes', help='Free-form notes')

    # Journal command
    journal_parser = subparsers.add_parser('journal', help='Reflection journal')
    journal_parser.add_argument('action', choices=['add', 'list'], help='Journal action')
    journal_parser.add_argument('--good', help='Good things, one per line')
    journal_parser.add_argument('--lessons', help='Lessons learned, one per line')
    journal_parser.add_argument('--improvements', help='Things to improve, one per line')
    journal_parser.add_argument('--notes', help='Free-form notes')
    journal_parser.add_argument('--limit', type=int, default=5, help='Entries to show')

    # Data command
    data_parser = subparsers.add_parser('data', help='Export, import, reset or restore data')
    data_parser.add_argument(
        'action',
        choices=['export', 'import', 'reset', 'restore'],
        help='Data action'
    )
    data_parser.add_argument('path', nargs='?', help='Export directory or file to import')

    args = parser.parse_args(argv)

    # Configure logging if verbose mode is enabled
    if args.verbose:
        logging.basicConfig(
            level=logging.DEBUG,
            format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
        )

    if not args.command:
        parser.print_help()
        return 1

    try:
        config = load_config(args.config)
        if args.data_dir:
            config.data_dir = args.data_dir

        if args.verbose:
            actual_config_path = args.config if args.config else get_default_config_path()
            print(f"Using config: {actual_config_path}")
            print(f"Using data dir: {config.data_dir}")

        store = JsonFileStore(config.data_dir, config.storage_key)

        page = page_for(args)
        if page and not args.ignore_gate:
            redirect = gate_redirect(store, page)
            if redirect:
                print(f"🔒 {REDIRECT_HINTS.get(redirect, redirect)}")
                return GATE_EXIT_CODE

        if args.command == 'status':
            cmd = StatusCommand(store, verbose=args.verbose)
            success = cmd.run()

        elif args.command == 'routine':
            cmd = RoutineCommand(store, verbose=args.verbose)
            success = cmd.run(args.action, args.routine, item_id=args.item, value=args.value)

        elif args.command == 'habits':
            cmd = HabitsCommand(store, verbose=args.verbose)
            success = cmd.run(
                args.action,
                habit_id=args.habit,
                day=args.date,
                category=args.category,
                export_path=args.export
            )

        elif args.command == 'study':
            cmd = StudyCommand(store, verbose=args.verbose)
            success = cmd.run(args.action, duration=args.minutes, subject=args.subject, notes=args.notes)

        elif args.command == 'journal':
            cmd = JournalCommand(store, verbose=args.verbose)
            success = cmd.run(
                args.action,
                good_things=args.good,
                lessons=args.lessons,
                improvements=args.improvements,
                notes=args.notes,
                limit=args.limit
            )

        elif args.command == 'data':
            cmd = DataCommand(store, config, verbose=args.verbose)
            success = cmd.run(args.action, path=args.path)

        else:
            print(f"Unknown command '{args.command}'.")
            return 1

        return 0 if success else 1

    except KeyboardInterrupt:
        print("\nOperation cancelled by user.")
        return 130
    except Exception as e:
        print(f"Error: {e}")
        if not args.verbose:
            print("Re-run with --verbose for more detail.")
        else:
            import traceback
            traceback.print_exc()
        return 1


if __name__ == '__main__':
    sys.exit(main())
