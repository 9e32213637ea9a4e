# -*- coding: utf-8 -*-

import logging
import os
from typing import Dict, Optional, Tuple

from PIL import Image, ImageTk

from domain.models import WORK, AssetLoadError

logger = logging.getLogger(__name__)

WORK_IMAGE = "Tomato.png"
BREAK_IMAGE = "Green tomato.png"
ALARM_SOUND = "Alarm.wav"

ICON_SIZE = (241, 241)


def default_assets_dir() -> str:
    root = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
    return os.path.join(root, "assets")


def image_name_for(phase: str) -> str:
    return WORK_IMAGE if phase == WORK else BREAK_IMAGE


def load_image(path: str, size: Tuple[int, int] = ICON_SIZE) -> Image.Image:
    if not os.path.exists(path):
        raise AssetLoadError(f"Image not found: {path}")
    try:
        with Image.open(path) as img:
            return img.convert("RGBA").resize(size, Image.LANCZOS)
    except OSError as e:
        raise AssetLoadError(f"Error loading image {path}: {e}") from e


class PhaseImages:
    """
    Caches one PhotoImage per image file.
    Missing images are logged once and come back as None.
    """

    def __init__(self, assets_dir: str, size: Tuple[int, int] = ICON_SIZE):
        self.assets_dir = assets_dir
        self.size = size
        self._cache: Dict[str, Optional[ImageTk.PhotoImage]] = {}

    def for_phase(self, phase: str) -> Optional[ImageTk.PhotoImage]:
        name = image_name_for(phase)
        if name not in self._cache:
            try:
                img = load_image(os.path.join(self.assets_dir, name), self.size)
                self._cache[name] = ImageTk.PhotoImage(img)
            except AssetLoadError as e:
                logger.warning("%s", e)
                self._cache[name] = None
        return self._cache[name]
