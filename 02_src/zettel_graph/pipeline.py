"""Phase abstraction and the sequential runner for the linking pipeline."""

import logging
from abc import ABC, abstractmethod
from typing import Any, Dict, Iterable, List

from .config import ZettelConfig

logger = logging.getLogger(__name__)


class PipelinePhase(ABC):
    phase_name: str

    def is_enabled(self, config: ZettelConfig) -> bool:
        """Settings gate; a disabled phase contributes ``disabled_result()``."""
        return True

    def disabled_result(self) -> Dict[str, Any]:
        return {}

    @abstractmethod
    def run(self, context: Dict[str, Any]) -> Dict[str, Any]:
        raise NotImplementedError


class PipelineRunner:
    def __init__(self, phases: Iterable[PipelinePhase]) -> None:
        self.phases: List[PipelinePhase] = list(phases)

    def run(self, context: Dict[str, Any]) -> Dict[str, Any]:
        current = dict(context)
        config = current.get("config")
        if not isinstance(config, ZettelConfig):
            config = ZettelConfig()
            current["config"] = config
        skipped: List[str] = []

        for phase in self.phases:
            if not phase.is_enabled(config):
                logger.debug("Phase %s disabled by settings", phase.phase_name)
                skipped.append(phase.phase_name)
                phase_result = phase.disabled_result()
            else:
                logger.debug("Running phase %s", phase.phase_name)
                phase_result = phase.run(current)
            if not isinstance(phase_result, dict):
                raise TypeError(f"Phase '{phase.phase_name}' must return dict context.")
            current.update(phase_result)

        current["skipped_phases"] = skipped
        return current
