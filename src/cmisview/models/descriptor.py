"""Pydantic models for the decoded module identity and capabilities."""

from __future__ import annotations

from typing import Annotated, Literal, Union

from pydantic import BaseModel, Field


class RevisionCompliance(BaseModel):
    """CMIS revision the module claims compliance with."""

    model_config = {"frozen": True}

    major: int
    minor: int

    def __str__(self) -> str:
        return f"Rev. {self.major}.{self.minor}"


class CableLength(BaseModel):
    """Cable assembly length; ``kilometers`` is None past the 6.3 km sentinel."""

    model_config = {"frozen": True}

    kilometers: float | None = None
    exceeds_max: bool = False


class CopperAttenuation(BaseModel):
    """Passive copper attenuation, dB."""

    model_config = {"frozen": True}

    at_5ghz: int = 0
    at_7ghz: int = 0
    at_12p9ghz: int = 0
    at_25p8ghz: int = 0


class OpticalMedia(BaseModel):
    """Optical media technology with its laser wavelength payload."""

    model_config = {"frozen": True}

    kind: Literal["optical"] = "optical"
    technology_code: int
    technology: str
    wavelength_nm: float | None = None
    wavelength_tolerance_nm: float | None = None


class CopperMedia(BaseModel):
    """Copper media technology with its attenuation payload."""

    model_config = {"frozen": True}

    kind: Literal["copper"] = "copper"
    technology_code: int
    technology: str
    attenuation: CopperAttenuation = Field(default_factory=CopperAttenuation)


MediaInterface = Annotated[Union[OpticalMedia, CopperMedia], Field(discriminator="kind")]


class SignalIntegrity(BaseModel):
    """CDR implementation and bypass control advertised on page 01h."""

    model_config = {"frozen": True}

    tx_cdr: bool = False
    rx_cdr: bool = False
    tx_cdr_bypass_control: bool = False
    rx_cdr_bypass_control: bool = False


class LinkLengths(BaseModel):
    """Maximum supported fiber length per media type."""

    model_config = {"frozen": True}

    smf_km: float = 0.0
    om5_m: int = 0
    om4_m: int = 0
    om3_m: int = 0
    om2_m: int = 0


class VendorInfo(BaseModel):
    """Vendor identification block from page 00h upper."""

    model_config = {"frozen": True}

    name: str = ""
    oui: str = "00:00:00"
    part_number: str = ""
    revision: str = ""
    serial_number: str = ""
    date_code: str = ""
    clei_code: str | None = None


class ModuleDescriptor(BaseModel):
    """Top-level identity and capability fields of a CMIS module."""

    model_config = {"frozen": True}

    identifier: int
    connector: int
    module_type: int
    module_type_label: str
    revision: RevisionCompliance
    power_class: int = Field(ge=1, le=8)
    max_power_w: float
    cable_length: CableLength
    media: MediaInterface
    vendor: VendorInfo
    signal_integrity: SignalIntegrity | None = None
    link_lengths: LinkLengths | None = None

    @property
    def is_copper(self) -> bool:
        return isinstance(self.media, CopperMedia)
