# -*- coding: utf-8 -*-

import logging
import os
from typing import Optional

import pygame

from domain.models import AssetLoadError

logger = logging.getLogger(__name__)


class AlarmPlayer:
    """
    Looping alarm clip on pygame.mixer.
    A missing file or an unusable audio device only costs us the sound.
    """

    def __init__(self, path: str):
        self.path = path
        self._sound: Optional["pygame.mixer.Sound"] = None
        self._channel = None

    @property
    def is_playing(self) -> bool:
        return self._channel is not None and self._channel.get_busy()

    def _load(self) -> "pygame.mixer.Sound":
        if not os.path.exists(self.path):
            raise AssetLoadError(f"Sound file not found: {self.path}")
        try:
            if not pygame.mixer.get_init():
                pygame.mixer.init()
            return pygame.mixer.Sound(self.path)
        except pygame.error as e:
            raise AssetLoadError(f"Error loading alarm {self.path}: {e}") from e

    def start(self) -> None:
        self.stop()
        try:
            self._sound = self._load()
            self._channel = self._sound.play(loops=-1)
        except AssetLoadError as e:
            logger.warning("%s", e)
            self._sound = None
            self._channel = None

    def stop(self) -> None:
        if self._sound is not None:
            try:
                self._sound.stop()
            except pygame.error:
                logger.exception("Error stopping alarm")
        self._sound = None
        self._channel = None
