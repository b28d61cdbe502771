from abc import ABC, abstractmethod
from collections.abc import Sequence

from handnotes.logging.logger import Log
from handnotes.pages.exceptions import SagaStepError
from handnotes.pages.models import UploadContext


class SagaStep(ABC):
    """One forward action of a saga, with an optional compensating action."""

    name: str = ""

    @abstractmethod
    def run(self, context: UploadContext) -> UploadContext:
        raise NotImplementedError

    def compensate(self, context: UploadContext) -> None:
        """Undo the effects of run(). Steps without side effects keep this no-op."""


class Saga:
    """Runs steps in order; on failure compensates completed steps in reverse."""

    def __init__(self, steps: Sequence[SagaStep]) -> None:
        self._steps = list(steps)

    def run(self, context: UploadContext) -> UploadContext:
        """Execute every step.

        Raises:
            SagaStepError: wrapping the first failure, after compensation.
        """
        completed: list[SagaStep] = []
        for step in self._steps:
            try:
                context = step.run(context)
            except Exception as exc:
                Log.error(f"Saga step '{step.name}' failed: {exc}")
                self._unwind(completed, context)
                raise SagaStepError(step.name, exc) from exc
            completed.append(step)
        return context

    @staticmethod
    def _unwind(completed: list[SagaStep], context: UploadContext) -> None:
        for step in reversed(completed):
            try:
                step.compensate(context)
                Log.info(f"Compensated saga step '{step.name}'")
            except Exception as exc:
                Log.error(f"Compensation for saga step '{step.name}' failed: {exc}")
