"""Combined decode result handed to presentation layers."""

from __future__ import annotations

from pydantic import BaseModel

from cmisview.models.descriptor import ModuleDescriptor
from cmisview.models.diagnostics import DiagnosticsRecord


class ModuleInfo(BaseModel):
    """Descriptor and diagnostics decoded from one module memory buffer."""

    model_config = {"frozen": True}

    length: int
    descriptor: ModuleDescriptor
    diagnostics: DiagnosticsRecord
