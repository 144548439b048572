"""
ROSTER API -- Terminal form demo

The form page, in a terminal:

  1. Enter a name (required, at most 20 characters)
  2. Pick a role (Student / Engineer / Teacher)
  3. Confirm the form is filled in correctly
  4. Send the createUser mutation, then re-fetch the user list

At the menu, [s] submits a new user, [r] re-fetches the list, [q] quits.

Run with:
    python demo/demo_form.py

Requires the API to be running (ROSTER_API_URL, default
http://localhost:8000/api/graphql).
"""

import logging
import sys

from roster_client.form import ROLES, FormValues, RosterForm
from roster_client.graphql import DEFAULT_URL, RosterClient

# ---------------------------------------------------------------------------
# ANSI color codes
# ---------------------------------------------------------------------------

RESET = "\033[0m"
BOLD = "\033[1m"
DIM = "\033[2m"

CYAN = "\033[36m"
GREEN = "\033[32m"
RED = "\033[31m"
YELLOW = "\033[33m"
WHITE = "\033[97m"
MAGENTA = "\033[35m"


def header(text: str) -> None:
    width = 64
    print()
    print(f"{CYAN}{BOLD}{'=' * width}{RESET}")
    print(f"{CYAN}{BOLD}  {text}{RESET}")
    print(f"{CYAN}{BOLD}{'=' * width}{RESET}")
    print()


def field_error(form: RosterForm, name: str) -> None:
    if name in form.errors:
        print(f"    {RED}{form.errors[name]}{RESET}")


# ---------------------------------------------------------------------------
# Input
# ---------------------------------------------------------------------------

def ask_values() -> FormValues:
    """Prompt for the three form fields. Validation happens in the form."""
    name = input(f"  {WHITE}Enter your name:{RESET} ").strip()

    print(f"  {WHITE}Choose your role:{RESET}")
    for i, role in enumerate(ROLES, start=1):
        print(f"    {DIM}{i}){RESET} {role}")
    choice = input(f"  {WHITE}Role [1-{len(ROLES)}]:{RESET} ").strip()
    role = ROLES[int(choice) - 1] if choice.isdigit() and 1 <= int(choice) <= len(ROLES) else ""

    terms = input(f"  {WHITE}Filled in correctly? [y/N]:{RESET} ").strip().lower() in ("y", "yes")
    return FormValues(name=name, role=role, terms=terms)


# ---------------------------------------------------------------------------
# Output
# ---------------------------------------------------------------------------

def render(form: RosterForm) -> None:
    print()
    print(f"  {MAGENTA}{BOLD}{form.headline}{RESET}")

    if form.result:
        color = RED if form.result.startswith("Error") else GREEN
        print(f"  {color}{form.result}{RESET}")

    if form.users:
        print()
        print(f"  {WHITE}{BOLD}Users from GraphQL Server ({len(form.users)}):{RESET}")
        for user in form.users:
            print(f"    {BOLD}{user.name}{RESET} - {user.role}  {DIM}ID: {user.id}{RESET}")
    print()


# ---------------------------------------------------------------------------
# Main loop
# ---------------------------------------------------------------------------

def main() -> None:
    logging.basicConfig(level=logging.WARNING, format="%(asctime)s [%(name)s] %(levelname)s: %(message)s")

    header("R O S T E R   --   my mind is my arcanery")
    print(f"  {DIM}API: {DEFAULT_URL}{RESET}")

    form = RosterForm(RosterClient())

    while True:
        command = input(f"  {YELLOW}[s]ubmit  [r]efresh  [q]uit >{RESET} ").strip().lower()

        if command in ("q", "quit"):
            break

        if command in ("r", "refresh"):
            print(f"  {DIM}Sending GraphQL query...{RESET}")
            form.refresh()
            render(form)
            continue

        if command in ("s", "submit"):
            form.values = ask_values()
            if form.submit() is None and form.errors:
                for name in ("name", "role", "terms"):
                    field_error(form, name)
                print()
                continue
            render(form)
            continue

        print(f"  {DIM}Unknown command: {command!r}{RESET}")


if __name__ == "__main__":
    try:
        main()
    except (KeyboardInterrupt, EOFError):
        print()
        sys.exit(0)
