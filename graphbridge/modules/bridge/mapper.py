"""Classification of raw process outcomes into success or error results."""

from dataclasses import dataclass, field
from typing import List, Optional

from ..process import ProcessResult


@dataclass
class MappedResult:
    """Normalized outcome of a bridged command."""

    succeeded: bool
    payload: List[str] = field(default_factory=list)
    message: Optional[str] = None


def classify(result: ProcessResult) -> MappedResult:
    """
    Map a process result to exactly one of success or error.

    Success requires a zero exit code and blank stderr. Stdout is kept as the
    payload in both branches since the CLI often prints diagnostics there.
    """
    if result.succeeded:
        payload = [result.output] if result.output.strip() else []
        return MappedResult(succeeded=True, payload=payload)

    return MappedResult(succeeded=False, payload=[result.output], message=result.error)
