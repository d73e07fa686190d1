from typing import Dict, List, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field


class GoModule(BaseModel):
    """
    The module a package belongs to, as reported by ``go list -json``.

    Attributes:
        path (str): Module path, the prefix of every package it contains
        main (bool): Whether this is the main module of the build
        version (str, optional): Resolved version for dependency modules
        dir (str, optional): Directory holding the module's files
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    path: str = Field(alias="Path")
    main: bool = Field(default=False, alias="Main")
    version: Optional[str] = Field(default=None, alias="Version")
    dir: Optional[str] = Field(default=None, alias="Dir")


class PackageError(BaseModel):
    """A load error attached to a single package"""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    err: str = Field(alias="Err")
    pos: str = Field(default="", alias="Pos")
    import_stack: Tuple[str, ...] = Field(default=(), alias="ImportStack")

    def __str__(self) -> str:
        if self.pos:
            return f"{self.pos}: {self.err}"
        return self.err


class PackageRecord(BaseModel):
    """
    One loaded package: its import identifier and the packages it imports.

    Records are produced once by the loader and never modified afterwards.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    id: str = Field(alias="ImportPath")
    name: str = Field(default="", alias="Name")
    imports: Tuple[str, ...] = Field(default=(), alias="Imports")
    module: Optional[GoModule] = Field(default=None, alias="Module")
    dep_only: bool = Field(default=False, alias="DepOnly")
    standard: bool = Field(default=False, alias="Standard")
    error: Optional[PackageError] = Field(default=None, alias="Error")
    deps_errors: Tuple[PackageError, ...] = Field(default=(), alias="DepsErrors")

    def __repr__(self) -> str:
        return f"PackageRecord(id={self.id}, imports={len(self.imports)})"


def root_packages(records: List[PackageRecord]) -> List[PackageRecord]:
    """Packages matched by the load pattern rather than pulled in as dependencies"""
    return [r for r in records if not r.dep_only]


def index_packages(records: List[PackageRecord]) -> Dict[str, PackageRecord]:
    return {r.id: r for r in records}
