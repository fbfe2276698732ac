#!/usr/bin/env python3
"""
Pebble CLI - Interactive Training Wizard
========================================
Collects the framework, files and resource requirements for a training job,
shows a price estimate and loops on a review step until you proceed.
Nothing is actually trained, provisioned or saved.

Usage:
  python3 wizard.py
  pebble                  # console script after: pip install -e .
"""
import logging
import sys
from pathlib import Path
from typing import Any, Optional

from config_loader import load_config
from pricing import estimate_training_price, format_price
from prompts import (
    WizardCancelled, WizardError,
    banner, bold, choose, cyan, green, magenta, prompt, prompt_bool, prompt_int,
    red, validate_required, yellow,
)
from training_session import (
    FRAMEWORKS, GPU_INSTANCES, GPU_TYPES, OUTRO_MESSAGES, RESOURCE_MODES, REVIEW_OPTIONS,
    Framework, GpuInstance, GpuType, ResourceMode, ReviewChoice, TrainingSession, next_mode,
)

logger = logging.getLogger(__name__)

MAIN_MENU = [
    ("training",   "Training"),
    ("deployment", "Deployment"),
]


# ── Files ─────────────────────────────────────────────────────
def list_files(directory: Optional[Path] = None) -> list[str]:
    """Names of the regular files (no directories) in ``directory``, default cwd."""
    directory = Path.cwd() if directory is None else directory
    files = sorted(p.name for p in directory.iterdir() if p.is_file())
    logger.debug("Found %d file(s) in %s", len(files), directory)
    return files

def select_file(message: str) -> str:
    files = list_files()
    if not files:
        raise WizardError(f"No files to choose from in {Path.cwd()}")
    return choose(message, [(f, f) for f in files])


# ════════════════════════════════════════════════════════════════
#  RESOURCE BLOCKS: re-run from scratch on every pass of the loop
# ════════════════════════════════════════════════════════════════
def collect_distributed(session: TrainingSession, cfg: dict[str, Any]) -> None:
    session.model_parameters = prompt_int(
        "Enter the number of model parameters", "model parameters", "e.g. 5000 parameters")
    session.training_examples = prompt_int(
        "Enter the number of training examples (specify training examples in full dataset)",
        "training examples", "e.g. 250 examples")
    session.epochs = prompt_int("Enter the number of epochs", "epochs", "e.g. 10 epochs")

    session.gpu_type = GpuType(choose(
        "Select GPU type (leave default for automatic selection):", GPU_TYPES))

    session.vram = None
    if prompt_bool("Do you want to specify minimum VRAM?", False):
        session.vram = prompt("Enter the minimum amount of VRAM (e.g., 16GB)", "e.g. 16",
                              validate_required("VRAM amount is required!"))

    session.training_price = estimate_training_price(
        session.model_parameters, session.training_examples, session.epochs,
        cfg["price_per_tflop"])

def collect_gpu(session: TrainingSession, cfg: dict[str, Any]) -> None:
    session.gpu_instance = GpuInstance(choose(
        "Select a specific GPU instance from the list:", GPU_INSTANCES))
    session.cpu_cores = prompt_int("Enter the number of CPU cores", "CPU cores", "8")
    session.ram = prompt("Enter the amount of RAM (e.g., 64GB)", "64GB",
                         validate_required("RAM amount is required!"))

COLLECTORS = {
    ResourceMode.DISTRIBUTED: collect_distributed,
    ResourceMode.GPU:         collect_gpu,
}


# ════════════════════════════════════════════════════════════════
#  SUMMARY + FLOWS
# ════════════════════════════════════════════════════════════════
def print_summary(session: TrainingSession):
    """Print the selected options for the active resource mode."""
    W = 26
    def row(k, v, indent="  "): print(f"{indent}{k.ljust(W)} {v}")

    print(f"\n  {bold('Selected options:')}")
    row("- Framework:",              cyan(session.framework.value))
    row("- Training script:",        cyan(session.training_script))
    row("- Dockerfile:",             cyan(session.dockerfile))
    row("- Resource requirements:",  cyan(session.mode.value))
    if session.mode is ResourceMode.DISTRIBUTED:
        row("- Model parameters:",   yellow(session.model_parameters))
        row("- Training examples:",  yellow(session.training_examples))
        row("- Epochs:",             yellow(session.epochs))
        row("- GPU type:",           magenta(session.gpu_type.value), indent="    ")
        row("- Minimum VRAM:",       magenta(session.vram or "Not specified"), indent="    ")
        print(f"  {bold('Estimated training price:')} {green(format_price(session.training_price))}")
    else:
        row("- GPU instance:",       magenta(session.gpu_instance.value), indent="    ")
        row("- CPU cores:",          magenta(session.cpu_cores), indent="    ")
        row("- RAM:",                magenta(session.ram), indent="    ")

def training_flow(cfg: dict[str, Any]) -> TrainingSession:
    session = TrainingSession()
    session.framework = Framework(choose("Select the framework:", FRAMEWORKS))
    session.training_script = select_file("Select the training script:")
    session.dockerfile = select_file("Select the Dockerfile:")
    session.mode = ResourceMode(choose("Select resource requirements:", RESOURCE_MODES))

    while True:
        COLLECTORS[session.mode](session, cfg)
        print_summary(session)
        choice = ReviewChoice(choose("Review the options and proceed:", REVIEW_OPTIONS))
        mode = next_mode(choice)
        if mode is None:
            break
        session.switch_mode(mode)

    print(f"\n  {banner(OUTRO_MESSAGES[session.mode])}\n")
    return session

def deployment_flow():
    print(f"\n  {banner('Deployment flow not implemented yet.')}\n")

def run_wizard(cfg: dict[str, Any]) -> Optional[TrainingSession]:
    """Run the interactive wizard. Returns the training session, or None for deployment."""
    print(f"\n  {banner('Welcome to the Pebble CLI!')}")
    option = choose("Select an option:", MAIN_MENU)
    if option == "training":
        return training_flow(cfg)
    deployment_flow()
    return None


def main():
    """Entry point for the pebble console script."""
    try:
        cfg = load_config()
        logging.basicConfig(level=cfg["log_level"],
                            format="%(levelname)s %(name)s: %(message)s")
        run_wizard(cfg)
    except (WizardCancelled, KeyboardInterrupt):
        print(f"\n  {yellow('Operation cancelled.')}")
        sys.exit(0)
    except Exception as e:
        logger.debug("Wizard failed", exc_info=True)
        msg = f"An error occurred: {type(e).__name__}: {e}"
        print(f"\n  {red(msg)}")
        sys.exit(1)


if __name__ == "__main__":
    main()
