"""
Pebble CLI - Price Estimates
============================
Toy pricing used by the wizard summary.

Distributed training is billed by estimated compute:
  flops = 2 x model_parameters x 3 x training_examples x epochs
  price = flops / 1e12 x price_per_tflop

GPU instances are billed per hour; the rate is only shown as a label.
"""
import logging
import math

logger = logging.getLogger(__name__)

PRICE_PER_TFLOP = 0.004   # USD, placeholder rate
FLOPS_PER_TFLOP = 1e12

GPU_HOURLY_RATES = {
    "a100":    10,
    "a6000":    8,
    "rtx4090":  6,
    "h100":    15,
}


def estimate_flops(model_parameters: int, training_examples: int, epochs: int) -> int:
    """2 FLOPs per parameter per example forward, x3 to include the backward pass."""
    return 2 * model_parameters * 3 * training_examples * epochs


def estimate_training_price(model_parameters: int, training_examples: int, epochs: int,
                            price_per_tflop: float = PRICE_PER_TFLOP) -> float:
    flops = estimate_flops(model_parameters, training_examples, epochs)
    try:
        tflops = flops / FLOPS_PER_TFLOP
    except OverflowError:
        tflops = math.inf
    price = tflops * price_per_tflop
    logger.debug("Estimated %g TFLOPs at $%g/TFLOP -> $%.12f", tflops, price_per_tflop, price)
    return price


def format_price(price: float) -> str:
    return f"${price:.12f}"


def hourly_rate_hint(instance: str) -> str:
    return f"Price: ${GPU_HOURLY_RATES[instance]} per hour"
