from __future__ import annotations

from PIL import Image

from resizer.models.image_model import Dimensions


class ProcessService:
    def scale(self, image: Image.Image, width: int, height: int) -> Image.Image:
        """
        Масштабирование до точного размера width x height (бикубическая интерполяция).
        Пропорции не сохраняются; режим изображения остаётся прежним.
        Исходное изображение не изменяется.
        """
        if width <= 0 or height <= 0:
            raise ValueError(f"Target size must be positive, got {width}x{height}")
        # Pillow falls back to nearest for "1" and "P" modes and copies same-size input
        return image.resize((width, height), Image.Resampling.BICUBIC)

    def scale_to(self, image: Image.Image, dimensions: Dimensions) -> Image.Image:
        return self.scale(image, *dimensions.as_tuple())
