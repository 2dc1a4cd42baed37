from datetime import datetime
from typing import List, Literal, Optional

from pydantic import BaseModel, Field


class ScenarioResult(BaseModel):
    name: str
    title: str
    status: Literal["passed", "failed"]
    duration_ms: int
    final_url: Optional[str] = None
    error: Optional[str] = None
    screenshot: Optional[str] = None

    @property
    def passed(self) -> bool:
        return self.status == "passed"


class RunReport(BaseModel):
    """Outcome of one run over a selection of scenarios"""

    base_url: str
    browser: str
    started_at: datetime = Field(default_factory=datetime.now)
    finished_at: Optional[datetime] = None
    results: List[ScenarioResult] = Field(default_factory=list)

    def add(self, result: ScenarioResult) -> ScenarioResult:
        self.results.append(result)
        return result

    def finish(self) -> "RunReport":
        self.finished_at = datetime.now()
        return self

    @property
    def passed(self) -> List[ScenarioResult]:
        return [r for r in self.results if r.passed]

    @property
    def failed(self) -> List[ScenarioResult]:
        return [r for r in self.results if not r.passed]

    @property
    def success(self) -> bool:
        return not self.failed

    def summary(self) -> str:
        lines = [f"{len(self.passed)}/{len(self.results)} scenarios passed on {self.browser} ({self.base_url})"]
        for result in self.results:
            line = f"  [{result.status.upper()}] {result.name} - {result.title} ({result.duration_ms}ms)"
            if result.error:
                # playwright messages carry a multi-line call log
                line += f"\n      {result.error.splitlines()[0]}"
            lines.append(line)
        return "\n".join(lines)

    def export_json(self) -> str:
        return self.model_dump_json(indent=2)

    @classmethod
    def from_json(cls, data: str) -> "RunReport":
        return cls.model_validate_json(data)
