from __future__ import annotations

from typing import Any, Dict, List, Mapping, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator


class AuditOptions(BaseModel):
    """pa11y options. Unknown keys are passed through to the engine untouched."""

    model_config = ConfigDict(extra="allow", populate_by_name=True)

    standard: Optional[str] = None
    runners: Optional[List[str]] = None
    timeout: Optional[int] = None
    wait: Optional[int] = None
    actions: Optional[List[str]] = None
    hide_elements: Optional[str] = Field(default=None, alias="hideElements")
    root_element: Optional[str] = Field(default=None, alias="rootElement")
    include_notices: Optional[bool] = Field(default=None, alias="includeNotices")
    include_warnings: Optional[bool] = Field(default=None, alias="includeWarnings")
    ignore: Optional[List[str]] = None
    headers: Optional[Dict[str, str]] = None
    chrome_launch_config: Optional[Dict[str, Any]] = Field(default=None, alias="chromeLaunchConfig")
    viewport: Optional[Dict[str, Any]] = None

    def to_engine(self) -> Dict[str, Any]:
        """Options explicitly set, keyed the way pa11y expects them."""
        data = self.model_dump(by_alias=True, exclude_unset=True)
        data.update(self.model_extra or {})
        return data

    def merged_with(self, overrides: "AuditOptions") -> "AuditOptions":
        # Keys set on ``overrides`` win, one field at a time.
        return AuditOptions.model_validate({**self.to_engine(), **overrides.to_engine()})


class TestDescriptor(BaseModel):
    model_config = ConfigDict(frozen=True)

    url: str
    name: str
    options: AuditOptions = Field(default_factory=AuditOptions)

    @classmethod
    def from_mapping(cls, mapping: Mapping[str, Any]) -> "TestDescriptor":
        """Build from a raw ``{url, name, ...auditOptions}`` mapping."""
        data = dict(mapping)
        url = data.pop("url", None)
        name = data.pop("name", None)
        return cls(url=url, name=name, options=AuditOptions.model_validate(data))


class A11yConfig(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    defaults: AuditOptions = Field(default_factory=AuditOptions)
    tests: List[TestDescriptor] = []
    report_dir: str = Field(alias="reportDir")


class Issue(BaseModel):
    model_config = ConfigDict(extra="allow", frozen=True)

    code: str
    selector: str = ""
    context: str = ""  # surrounding markup, may be truncated by the engine

    @field_validator("selector", "context", mode="before")
    @classmethod
    def _none_to_empty(cls, v):
        return "" if v is None else v


class AuditReport(BaseModel):
    model_config = ConfigDict(extra="allow", populate_by_name=True)

    name: str
    document_title: Optional[str] = Field(default=None, alias="documentTitle")
    page_url: Optional[str] = Field(default=None, alias="pageUrl")
    issues: List[Issue] = []


class SimplifiedIssue(BaseModel):
    selector: str
    context: str


class FilteredResult(BaseModel):
    name: str
    simplified_list: List[SimplifiedIssue] = []
    error_count: int = 0


class ReportEntry(BaseModel):
    name: str
    selector: str
    context: str


class AggregateReport(BaseModel):
    """Flattened issues across all tests plus the running error total."""

    model_config = ConfigDict(frozen=True)

    entries: List[ReportEntry] = []
    total_errors: int = 0
