"""Minimal CLI loop for zAIrk.

Usage (example):
    python run.py [theme]
Then type commands:
    look
    go n
    take key
"""
from __future__ import annotations
import logging
import sys
import difflib
from game.bootstrap import start_session
from zairk.core.actions import look, go, take, drop, examine, inventory, ActionError
from zairk.core.commands import parse_command, NEEDS_ARGUMENT
from zairk.gen.errors import WorldGenerationError
from config import get_log_level, get_theme

PROMPT = "> "

COMMAND_HELP = {
    'go': {'usage': 'go <direction>', 'desc': 'Move in a direction (north, south, east, west, up, down).'},
    'n/s/e/w/u/d': {'usage': 'n, s, e, w, u, d', 'desc': 'Shortcuts for movement.'},
    'look': {'usage': 'look', 'desc': 'Look around the current location.'},
    'examine': {'usage': 'examine <object>', 'desc': 'Examine an item, or the room itself (examine room).'},
    'take': {'usage': 'take <item>', 'desc': 'Pick up an item.'},
    'drop': {'usage': 'drop <item>', 'desc': 'Drop an item from your inventory.'},
    'inventory': {'usage': 'inventory | i', 'desc': 'Show your inventory.'},
    'map': {'usage': 'map', 'desc': 'Show where the map file was written.'},
    'help': {'usage': 'help', 'desc': 'Display this help information.'},
    'quit': {'usage': 'quit | exit', 'desc': 'Exit the game.'},
}


def help_lines():
    lines = ["Available commands:"]
    max_usage = max(len(info['usage']) for info in COMMAND_HELP.values())
    for name, info in COMMAND_HELP.items():
        usage = info['usage']
        desc = info['desc']
        lines.append(f" {usage.ljust(max_usage)}  - {desc}")
    return lines


def _print_lines(res):
    for line in res["lines"]:
        print(line)


def game_loop(theme: str):
    print(f"-- Generating a {theme} world, this can take a while... --")
    try:
        session, map_path = start_session(theme)
    except WorldGenerationError as e:
        print(f"Error: {e}")
        return 1
    print("-- New game started. Type 'help' for a list of commands. --")
    _print_lines(look(session))
    while True:
        try:
            line = input(PROMPT)
        except (EOFError, KeyboardInterrupt):
            print()
            break
        cmd = parse_command(line)
        if cmd.verb == "empty":
            continue
        if cmd.verb == "quit":
            print("Thanks for playing zAIrk!")
            break
        if cmd.verb == "help":
            for l in help_lines():
                print(l)
            continue
        if cmd.verb == "map":
            if map_path:
                print("A map of the game world has been generated.")
                print(f"You can view it at: {map_path}")
            else:
                print("No map file was written.")
            continue
        if cmd.verb == "unknown":
            word = cmd.argument.split()[0].lower()
            close = difflib.get_close_matches(word, ["go", "look", "examine", "take", "drop", "inventory", "help", "quit"], n=2)
            if close:
                print(f"I don't understand '{word}'. Did you mean: {', '.join(close)}?")
            else:
                print("I don't understand that command. Type 'help' for a list of commands.")
            continue
        if cmd.verb in NEEDS_ARGUMENT and not cmd.argument:
            print("Go where?" if cmd.verb == "move" else f"{cmd.verb.title()} what?")
            continue
        try:
            if cmd.verb == "move":
                res = go(session, cmd.argument)
            elif cmd.verb == "take":
                res = take(session, cmd.argument)
            elif cmd.verb == "drop":
                res = drop(session, cmd.argument)
            elif cmd.verb == "examine":
                res = examine(session, cmd.argument)
            elif cmd.verb == "inventory":
                res = inventory(session)
            else:
                res = look(session)
        except ActionError as e:
            print(f"Error: {e}")
            continue
        _print_lines(res)
    return 0


def main(argv=None):
    argv = sys.argv[1:] if argv is None else argv
    logging.basicConfig(level=get_log_level(), format="%(levelname)s %(name)s: %(message)s")
    theme = " ".join(argv).strip() or get_theme()
    return game_loop(theme)


if __name__ == "__main__":
    sys.exit(main())
