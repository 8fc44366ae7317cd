"""Note index phase."""

from typing import Any, Dict

from ..note_index import build_note_index
from ..pipeline import PipelinePhase


class NoteIndexPhase(PipelinePhase):
    phase_name = "indexing"

    def run(self, context: Dict[str, Any]) -> Dict[str, Any]:
        return {"note_index": build_note_index(context.get("documents", []))}
