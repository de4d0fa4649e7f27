from __future__ import annotations

from typing import Tuple

import numpy as np
from PIL import Image


def gradient_image(size: Tuple[int, int], mode: str = "RGB") -> Image.Image:
    """Диагональный градиент нужного размера и режима."""
    width, height = size
    values = np.linspace(0, 255, num=width * height, dtype=np.float32).reshape(height, width)
    gray = Image.fromarray(values.astype(np.uint8))
    return gray.convert("RGB").convert(mode)
