"""Human or JSON output for ServiceResult.

``--json`` emits the ServiceResult model verbatim; otherwise the Rich
renderers in :mod:`usecasectl.output.renderers` produce text.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from pydantic import BaseModel

from usecasectl.output.renderers import render_result

if TYPE_CHECKING:
    from usecasectl.services.result import ServiceResult


class OutputSettings(BaseModel):
    """Output mode flags, frozen after construction."""

    model_config = {"frozen": True}

    json_output: bool = False
    verbose: bool = False


def format_result(result: ServiceResult, *, settings: OutputSettings | None = None) -> str:
    """Format a ServiceResult for display."""
    settings = settings or OutputSettings()
    if settings.json_output:
        return result.model_dump_json(indent=2)
    return render_result(result, verbose=settings.verbose)
