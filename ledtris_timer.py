
"""Drop timers: the engine only ever calls start(interval_ms) and stop()"""
import logging

import pygame

log = logging.getLogger(__name__)

DROP_EVENT = pygame.USEREVENT + 1


class PygameDropTimer:
    """Posts DROP_EVENT every interval.

    pygame.time.set_timer replaces a running timer for the same event, so a
    restart throws away whatever part of the old interval had elapsed.
    """
    def __init__(self, event_type: int = DROP_EVENT):
        self.event_type = event_type
        self.interval_ms = 0

    @property
    def active(self) -> bool:
        return self.interval_ms > 0

    def start(self, interval_ms: int) -> None:
        self.interval_ms = int(interval_ms)
        pygame.time.set_timer(self.event_type, self.interval_ms)
        log.debug("drop timer started at %d ms", self.interval_ms)

    def stop(self) -> None:
        if self.interval_ms:
            log.debug("drop timer stopped")
        self.interval_ms = 0
        pygame.time.set_timer(self.event_type, 0)
