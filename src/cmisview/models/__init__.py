"""Pydantic data models for cmisview."""

from cmisview.models.descriptor import (
    CableLength,
    CopperAttenuation,
    CopperMedia,
    LinkLengths,
    MediaInterface,
    ModuleDescriptor,
    OpticalMedia,
    RevisionCompliance,
    SignalIntegrity,
    VendorInfo,
)
from cmisview.models.diagnostics import (
    DiagnosticsRecord,
    FlagTable,
    LaneMonitor,
    ModuleThresholds,
    ThresholdSet,
)
from cmisview.models.module import ModuleInfo

__all__ = [
    "CableLength",
    "CopperAttenuation",
    "CopperMedia",
    "DiagnosticsRecord",
    "FlagTable",
    "LaneMonitor",
    "LinkLengths",
    "MediaInterface",
    "ModuleDescriptor",
    "ModuleInfo",
    "ModuleThresholds",
    "OpticalMedia",
    "RevisionCompliance",
    "SignalIntegrity",
    "ThresholdSet",
    "VendorInfo",
]
