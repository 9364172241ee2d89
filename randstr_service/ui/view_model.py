"""View model for the random string generator screen."""

from __future__ import annotations

import logging
from concurrent.futures import Future, ThreadPoolExecutor
from typing import Optional, Tuple

from ..common.config import DEFAULT_IO_WORKERS
from ..common.constants import INVALID_LENGTH_MESSAGE, UNKNOWN_ERROR_MESSAGE
from ..data.entities import RandomStringData
from ..data.live import StateFlow
from ..data.repository import RandomStringRepository
from .state import Error, GenerationState, Idle, Loading, Success

__all__ = ["RandomStringViewModel"]

LOGGER = logging.getLogger(__name__)


class RandomStringViewModel:
    """Holds the generation state and the observed list of stored strings.

    Repository calls run on a background executor. ``generation_state`` and
    ``random_strings`` are ``StateFlow`` holders the UI reads or subscribes to.
    """

    def __init__(
        self,
        repository: RandomStringRepository,
        executor: Optional[ThreadPoolExecutor] = None,
        *,
        io_workers: int = DEFAULT_IO_WORKERS,
    ):
        self.repository = repository
        self._owns_executor = executor is None
        self.executor = executor or ThreadPoolExecutor(max_workers=io_workers, thread_name_prefix="randstr-io")

        self.generation_state: StateFlow[GenerationState] = StateFlow(Idle())
        self.random_strings: StateFlow[Tuple[RandomStringData, ...]] = StateFlow(())
        self._strings_subscription = repository.get_all_strings().subscribe(self.random_strings.set)

    def generate_random_string(self, length: int) -> Optional[Future]:
        """Request a new string; returns the pending ``Future`` or ``None`` for invalid input."""

        if length <= 0:
            self.generation_state.set(Error(INVALID_LENGTH_MESSAGE))
            return None

        self.generation_state.set(Loading())
        return self.executor.submit(self._generate, length)

    def _generate(self, length: int) -> GenerationState:
        try:
            state: GenerationState = Success(self.repository.generate_random_string(length))
        except Exception as exc:
            state = Error(str(exc) or UNKNOWN_ERROR_MESSAGE)
        self.generation_state.set(state)
        return state

    def delete_random_string(self, random_string: RandomStringData) -> Future:
        return self._run_in_background(self.repository.delete_string, random_string)

    def delete_all_random_strings(self) -> Future:
        return self._run_in_background(self.repository.delete_all_strings)

    def reset_generation_state(self) -> None:
        """Clear an error or success state back to idle."""
        self.generation_state.set(Idle())

    def _run_in_background(self, fn, *args) -> Future:
        def _task():
            try:
                return fn(*args)
            except Exception:
                LOGGER.exception("Background task %s failed", getattr(fn, "__name__", fn))
                raise

        return self.executor.submit(_task)

    def close(self) -> None:
        self._strings_subscription.cancel()
        if self._owns_executor:
            self.executor.shutdown(wait=True)
