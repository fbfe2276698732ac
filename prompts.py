"""
Pebble CLI - Prompt Helpers
===========================
Colour helpers and blocking console prompts used by the wizard.

Every prompt reads through ``_read`` so that Ctrl+C or end of input at any
step surfaces as a single ``WizardCancelled`` signal instead of a traceback.
"""
import logging
import re
from typing import Callable, Optional

logger = logging.getLogger(__name__)

# ── ANSI colours ──────────────────────────────────────────────
BOLD="\033[1m"; DIM="\033[2m"; CYAN="\033[36m"; MAGENTA="\033[35m"
GREEN="\033[32m"; YELLOW="\033[33m"; RED="\033[31m"; RESET="\033[0m"
BLACK="\033[30m"; BG_MAGENTA="\033[45m"

def bold(s):    return f"{BOLD}{s}{RESET}"
def dim(s):     return f"{DIM}{s}{RESET}"
def cyan(s):    return f"{CYAN}{s}{RESET}"
def green(s):   return f"{GREEN}{s}{RESET}"
def yellow(s):  return f"{YELLOW}{s}{RESET}"
def red(s):     return f"{RED}{s}{RESET}"
def magenta(s): return f"{MAGENTA}{s}{RESET}"
def banner(s):  return f"{BG_MAGENTA}{BLACK} {s} {RESET}"


class WizardError(Exception):
    """Error raised by the wizard itself and reported to the user."""


class WizardCancelled(WizardError):
    """The user aborted a prompt (Ctrl+C or end of input)."""


# ── Validators ────────────────────────────────────────────────
# Return an error message, or None when the value is acceptable.
Validator = Callable[[str], Optional[str]]

_POSITIVE_INT = re.compile(r"[0-9]+")
# Stays under the lowest int_max_str_digits setting (640).
MAX_INT_DIGITS = 600

def validate_positive_int(value: str, what: str) -> Optional[str]:
    if not _POSITIVE_INT.fullmatch(value):
        return "Invalid input! Please enter a positive integer."
    if not value.strip("0"):
        return f"Number of {what} must be greater than 0!"
    if len(value.lstrip("0")) > MAX_INT_DIGITS:
        return f"Number of {what} is too large (max {MAX_INT_DIGITS} digits)!"
    return None

def validate_required(message: str) -> Validator:
    """Build a validator that only rejects the empty string."""
    def _check(value: str) -> Optional[str]:
        return None if value else message
    return _check


# ── Prompts ───────────────────────────────────────────────────
def _read(q: str) -> str:
    try:
        return input(q)
    except (KeyboardInterrupt, EOFError):
        logger.debug("Prompt aborted by user: %r", q)
        raise WizardCancelled() from None

def prompt(q: str, placeholder: str = "", validate: Optional[Validator] = None) -> str:
    """Ask for free text, re-prompting with an inline error until it validates.

    The answer is validated and returned exactly as typed.
    """
    sfx = f" {dim('(' + placeholder + ')')}" if placeholder else ""
    while True:
        v = _read(f"  {q}{sfx}: ")
        err = validate(v) if validate else None
        if err is None: return v
        print(f"  {red(err)}")

def prompt_int(q: str, what: str, placeholder: str = "") -> int:
    """Ask for a strictly positive integer; ``what`` names it in the zero error."""
    value = prompt(q, placeholder, lambda v: validate_positive_int(v, what))
    return int(value.lstrip("0"))

def prompt_bool(q: str, default: bool = True) -> bool:
    sfx = "Y/n" if default else "y/N"
    raw = _read(f"  {q} [{dim(sfx)}]: ").strip().lower()
    if not raw: return default
    return raw in ("y", "yes", "1", "true")

def choose(q: str, opts: list, def_idx: int = 0) -> str:
    """
    Print a numbered option list and return the value of the picked entry.

    ``opts`` holds ``(value, label)`` or ``(value, label, hint)`` tuples.
    Enter alone accepts the entry at ``def_idx``.
    """
    if not opts:
        raise WizardError(f"No options to choose from for: {q}")
    print(f"\n  {bold(q)}")
    for i, (v, label, *hint) in enumerate(opts, 1):
        marker = green("->") if i == def_idx + 1 else "  "
        print(f"    {marker} {bold(str(i))}. {label:<40} {dim(hint[0] if hint else '')}")
    while True:
        raw = _read(f"  Choice [{dim(str(def_idx + 1))}]: ").strip()
        if not raw: return opts[def_idx][0]
        try:
            idx = int(raw) - 1
            if 0 <= idx < len(opts): return opts[idx][0]
        except ValueError:
            pass
        print(f"  {red(f'Enter 1-{len(opts)}.')}")
