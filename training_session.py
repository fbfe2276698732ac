"""
Pebble CLI - Training Session
=============================
The choices collected by one wizard run, plus the option tables and the
review-loop transition table that drive the prompts.
"""
import logging
from dataclasses import dataclass
from enum import Enum
from typing import Optional

from pricing import hourly_rate_hint

logger = logging.getLogger(__name__)


class Framework(Enum):
    PYTORCH    = "pytorch"
    TENSORFLOW = "tensorflow"
    XGBOOST    = "xgboost"
    SKLEARN    = "sklearn"


class ResourceMode(Enum):
    DISTRIBUTED = "distributed"
    GPU         = "gpu"


class GpuType(Enum):
    DEFAULT = "default"
    HIGH    = "high"


class GpuInstance(Enum):
    A100    = "a100"
    A6000   = "a6000"
    RTX4090 = "rtx4090"
    H100    = "h100"


class ReviewChoice(Enum):
    PROCEED          = "proceed"
    EDIT_DISTRIBUTED = "editDistributed"
    SWITCH_TO_GPU    = "switchToGpu"


# ── Option tables: (value, label[, hint]) ─────────────────────
FRAMEWORKS = [
    (Framework.PYTORCH.value,    "PyTorch"),
    (Framework.TENSORFLOW.value, "TensorFlow"),
    (Framework.XGBOOST.value,    "XGBoost"),
    (Framework.SKLEARN.value,    "scikit-learn"),
]
RESOURCE_MODES = [
    (ResourceMode.DISTRIBUTED.value, "Distributed training across our network",
     "Lowest price. Greatest scalability. Recommended."),
    (ResourceMode.GPU.value,         "Select GPU instance"),
]
GPU_TYPES = [
    (GpuType.DEFAULT.value, "Default"),
    (GpuType.HIGH.value,    "High-powered", "Recommended for highest compute throughput."),
]
GPU_INSTANCES = [
    (GpuInstance.A100.value,    "NVIDIA A100",     hourly_rate_hint(GpuInstance.A100.value)),
    (GpuInstance.A6000.value,   "NVIDIA A6000",    hourly_rate_hint(GpuInstance.A6000.value)),
    (GpuInstance.RTX4090.value, "NVIDIA RTX 4090", hourly_rate_hint(GpuInstance.RTX4090.value)),
    (GpuInstance.H100.value,    "NVIDIA H100",     hourly_rate_hint(GpuInstance.H100.value)),
]
REVIEW_OPTIONS = [
    (ReviewChoice.PROCEED.value,          "Proceed"),
    (ReviewChoice.EDIT_DISTRIBUTED.value, "Edit distributed training options"),
    (ReviewChoice.SWITCH_TO_GPU.value,    "Switch to GPU instance"),
]

# Review choices that send the loop back into a collection block.
REVIEW_TRANSITIONS = {
    ReviewChoice.EDIT_DISTRIBUTED: ResourceMode.DISTRIBUTED,
    ReviewChoice.SWITCH_TO_GPU:    ResourceMode.GPU,
}

OUTRO_MESSAGES = {
    ResourceMode.DISTRIBUTED: "Training job started!",
    ResourceMode.GPU:         "GPU instance booting...",
}


@dataclass
class TrainingSession:
    """In-memory state of one training wizard run. Never persisted."""
    framework: Optional[Framework] = None
    training_script: str = ""
    dockerfile: str = ""
    mode: ResourceMode = ResourceMode.DISTRIBUTED

    # distributed mode
    model_parameters: int = 0
    training_examples: int = 0
    epochs: int = 0
    gpu_type: GpuType = GpuType.DEFAULT
    vram: Optional[str] = None
    training_price: float = 0.0

    # gpu mode
    gpu_instance: Optional[GpuInstance] = None
    cpu_cores: int = 0
    ram: str = ""

    def clear_distributed(self) -> None:
        self.model_parameters = 0
        self.training_examples = 0
        self.epochs = 0
        self.gpu_type = GpuType.DEFAULT
        self.vram = None
        self.training_price = 0.0

    def clear_gpu(self) -> None:
        self.gpu_instance = None
        self.cpu_cores = 0
        self.ram = ""

    def switch_mode(self, mode: ResourceMode) -> None:
        """Enter ``mode``, dropping the fields of the mode being left."""
        if mode is not self.mode:
            if self.mode is ResourceMode.DISTRIBUTED:
                self.clear_distributed()
            else:
                self.clear_gpu()
            logger.debug("Resource mode %s -> %s", self.mode.value, mode.value)
        self.mode = mode


def next_mode(choice: ReviewChoice) -> Optional[ResourceMode]:
    """Mode to collect next after a review choice; None means proceed."""
    return REVIEW_TRANSITIONS.get(choice)
