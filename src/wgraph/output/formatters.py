"""Output-mode dispatch for ServiceResult.

The menu renders results for humans (Rich renderers), for scripts
(``--quiet``) or for machines (``--json``).  :func:`format_result` picks
the mode from :class:`OutputSettings`.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from pydantic import BaseModel, Field

if TYPE_CHECKING:
    from wgraph.services.result import ServiceResult


class OutputSettings(BaseModel):
    """Rendering switches derived from the CLI flags and ``[output]``."""

    model_config = {"frozen": True}

    json_output: bool = False
    quiet: bool = False
    verbose: bool = False
    weight_precision: int = Field(default=6, ge=1, le=17)


def format_result(result: ServiceResult, *, settings: OutputSettings | None = None) -> str:
    """Format a ServiceResult for display.

    ``json_output`` wins over ``quiet``, which wins over the default
    human rendering.
    """
    settings = settings or OutputSettings()
    if settings.json_output:
        return result.model_dump_json(indent=2)

    from wgraph.output.renderers import render_quiet, render_result

    if settings.quiet:
        return render_quiet(result)
    return render_result(
        result,
        verbose=settings.verbose,
        weight_precision=settings.weight_precision,
    )
